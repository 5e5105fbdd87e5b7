# modules/actions/action.py

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from internal.modules.needs.needs_manager import NeedsManager
from event_dispatcher import Event
from pet.state import PetState


class ActionType(Enum):
    """The four things a caller can do with a pet."""
    FEED = "feed"
    PLAY = "play"
    REST = "rest"
    STATUS = "status"


class Action(ABC):
    """
    Abstract base class for all actions.

    An action is a pure transition: it takes a state and a random source and
    returns the next state plus the events it produced.
    """

    advances_time = True

    def __init__(self, needs_manager: NeedsManager):
        """
        Initializes the Action.

        Args:
            needs_manager (NeedsManager): Reference to the NeedsManager.
        """
        self.needs_manager = needs_manager

    @abstractmethod
    def apply(self, state: PetState) -> Tuple[PetState, List[Event]]:
        """
        Applies the action's own effect, before any time passes.

        Returns:
            tuple: (new state, events)
        """
        pass

    def perform(self, state: PetState, rng) -> Tuple[PetState, List[Event]]:
        """
        Performs the action, followed by one passive tick for actions that advance time.

        Args:
            state (PetState): Current state.
            rng: Random source with randint(a, b).

        Returns:
            tuple: (new state, ordered events)
        """
        state, events = self.apply(state)
        if self.advances_time:
            state, tick_events = self.needs_manager.pass_hour(state, rng)
            events.extend(tick_events)
        return state, events

    def make_event(self, event_type, state: PetState, **data) -> Event:
        """
        Builds an event related to this action.

        Args:
            event_type (str): The type of event.
            state (PetState): State the event describes.
            **data: Additional data to include with the event.
        """
        return Event(event_type, {"name": state.name, **data})
