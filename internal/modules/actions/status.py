# modules/actions/status.py

from typing import List, Tuple

from .action import Action
from event_dispatcher import Event
from pet.state import PetState
from shared_models.pet_models import StatusSnapshot

class StatusAction(Action):
    """Reads the pet without changing it; no time passes."""

    advances_time = False

    def snapshot(self, state: PetState) -> StatusSnapshot:
        return StatusSnapshot(
            name=state.name,
            pet_type=state.pet_type,
            stats=self.needs_manager.get_needs_summary(state)
        )

    def apply(self, state: PetState) -> Tuple[PetState, List[Event]]:
        return state, [Event("status:snapshot", self.snapshot(state).model_dump())]
