# modules/actions/rest.py

from typing import List, Tuple

from .action import Action
from config import Config
from event_dispatcher import Event
from pet.state import PetState

class RestAction(Action):
    """Resting always restores health and costs a little happiness."""

    def apply(self, state: PetState) -> Tuple[PetState, List[Event]]:
        state = state.with_changes(
            health=Config.REST_HEALTH_DELTA,
            happiness=Config.REST_HAPPINESS_DELTA
        )
        return state, [self.make_event(
            "action:rest:rested", state,
            health=state.health, happiness=state.happiness
        )]
