# modules/actions/feed.py

from typing import List, Tuple

from .action import Action
from config import Config
from event_dispatcher import Event
from pet.state import PetState

class FeedAction(Action):
    """Feeding lowers hunger and improves health, unless the pet is already full."""

    def apply(self, state: PetState) -> Tuple[PetState, List[Event]]:
        events = [self.make_event("action:feed:started", state)]

        if state.hunger <= Config.FEED_FULL_THRESHOLD:
            events.append(self.make_event("action:feed:minimal", state))
            return state, events

        state = state.with_changes(
            hunger=Config.FEED_HUNGER_DELTA,
            health=Config.FEED_HEALTH_DELTA
        )
        events.append(self.make_event(
            "action:feed:satisfied", state,
            hunger=state.hunger, health=state.health
        ))
        return state, events
