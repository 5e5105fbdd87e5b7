# modules/actions/play.py

from typing import List, Tuple

from .action import Action
from config import Config
from event_dispatcher import Event
from pet.state import PetState

class PlayAction(Action):
    """Playing raises happiness at the cost of hunger; refused when starving or weak."""

    def apply(self, state: PetState) -> Tuple[PetState, List[Event]]:
        events = [self.make_event("action:play:started", state)]

        # hunger gate is checked before the health gate
        if state.hunger >= Config.PLAY_HUNGER_LIMIT:
            events.append(self.make_event("action:play:too_hungry", state, hunger=state.hunger))
            return state, events

        if state.health <= Config.PLAY_HEALTH_LIMIT:
            events.append(self.make_event("action:play:too_weak", state, health=state.health))
            return state, events

        state = state.with_changes(
            happiness=Config.PLAY_HAPPINESS_DELTA,
            hunger=Config.PLAY_HUNGER_DELTA
        )
        events.append(self.make_event(
            "action:play:fun", state,
            happiness=state.happiness, hunger=state.hunger
        ))
        return state, events
