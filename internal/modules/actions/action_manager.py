# modules/actions/action_manager.py

from typing import List, Tuple

from .action import Action, ActionType
from .feed import FeedAction
from .play import PlayAction
from .rest import RestAction
from .status import StatusAction
from internal.modules.needs.needs_manager import NeedsManager
from event_dispatcher import Event
from pet.state import PetState

class ActionManager:
    """
    Maps action types to actions and keeps execution counts.
    """

    def __init__(self, needs_manager: NeedsManager):
        """
        Initializes the ActionManager.

        Args:
            needs_manager (NeedsManager): Reference to the NeedsManager.
        """
        self.needs_manager = needs_manager
        self.available_actions = {
            ActionType.FEED: FeedAction(self.needs_manager),
            ActionType.PLAY: PlayAction(self.needs_manager),
            ActionType.REST: RestAction(self.needs_manager),
            ActionType.STATUS: StatusAction(self.needs_manager)
        }
        self.action_history = {}
        self.initialize_history()

    def initialize_history(self):
        """Initialize tracking for all available actions."""
        for action_type in self.available_actions:
            self.action_history[action_type] = {'total_executions': 0}

    def get_action(self, action_type) -> Action:
        """
        Raises:
            ValueError: If the action type is not recognized.
        """
        action = self.available_actions.get(action_type)
        if not action:
            raise ValueError(f"Action '{action_type}' is not available.")
        return action

    def perform_action(self, action_type, state: PetState, rng) -> Tuple[PetState, List[Event]]:
        """
        Executes the specified action and records it.

        Args:
            action_type (ActionType): The action to perform.
            state (PetState): Current state.
            rng: Random source with randint(a, b).

        Returns:
            tuple: (new state, ordered events)
        """
        action = self.get_action(action_type)
        result = action.perform(state, rng)
        self.action_history[action_type]['total_executions'] += 1
        return result

    def get_action_status(self, action_type=None):
        """
        Get execution counts.

        Args:
            action_type (ActionType, optional): Specific action to get status for.
        """
        if action_type is not None:
            if action_type not in self.available_actions:
                raise ValueError(f"Action '{action_type}' not found.")
            return dict(self.action_history[action_type])
        return {action_type.value: dict(history) for action_type, history in self.action_history.items()}
