"""
Internal core implementation.

`apply_action` is the whole state machine: (state, action, rng) -> (state, events).
`Internal` wraps it for the interactive driver, holding the current state and
publishing every event through the global dispatcher.
"""

import random
from typing import List, Optional, Tuple

from internal.modules.needs.needs_manager import NeedsManager
from internal.modules.actions.action_manager import ActionManager
from internal.modules.actions.action import ActionType
from event_dispatcher import global_event_dispatcher, Event, EventDispatcher
from loggers import InternalLogger
from pet.state import PetState, create_pet

_default_action_manager = ActionManager(NeedsManager())


def apply_action(state: PetState, action: ActionType, rng) -> Tuple[PetState, List[Event]]:
    """
    Apply one action to a pet.

    Feed, Play and Rest always end with exactly one passive tick; Status
    returns the same state with a single snapshot event.

    Args:
        state: Current pet.
        action: Member of ActionType.
        rng: Random source with randint(a, b), drawn once per tick.
    """
    return _default_action_manager.get_action(action).perform(state, rng)


class Internal:
    """
    One play session around a single pet.
    """

    def __init__(self, state: PetState, rng: Optional[random.Random] = None,
                 dispatcher: Optional[EventDispatcher] = None):
        """
        Args:
            state (PetState): The starting pet.
            rng (random.Random, optional): Random source; a fresh unseeded one by default.
            dispatcher (EventDispatcher, optional): Where events are published.
        """
        self.state = state
        self.rng = rng if rng is not None else random.Random()
        self.dispatcher = dispatcher if dispatcher is not None else global_event_dispatcher
        self.needs_manager = NeedsManager()
        self.action_manager = ActionManager(self.needs_manager)

    @classmethod
    def create(cls, pet_type: str, name: str, **kwargs) -> "Internal":
        """Build a session around a brand-new pet."""
        return cls(create_pet(pet_type, name), **kwargs)

    def start(self) -> List[Event]:
        """Announce the new pet."""
        event = Event("pet:created", {"name": self.state.name, "pet_type": self.state.pet_type})
        self._publish([event])
        return [event]

    def perform(self, action: ActionType) -> List[Event]:
        """
        Apply an action to the current pet and publish the resulting events.

        Returns:
            list: The events, in emission order.
        """
        old_state = self.state
        self.state, events = self.action_manager.perform_action(action, old_state, self.rng)

        InternalLogger.log_action(action.value, old_state.stats())
        for stat, old_value in old_state.stats().items():
            new_value = getattr(self.state, stat)
            if new_value != old_value:
                InternalLogger.log_state_change(stat, old_value, new_value)

        self._publish(events)
        return events

    def is_alive(self) -> bool:
        return self.state.is_alive()

    def announce_death(self) -> List[Event]:
        event = Event("pet:died", {"name": self.state.name})
        self._publish([event])
        return [event]

    def _publish(self, events: List[Event]) -> None:
        for event in events:
            self.dispatcher.dispatch_event(event)
