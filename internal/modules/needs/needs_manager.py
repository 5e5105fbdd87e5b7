# modules/needs/needs_manager.py

from typing import List, Tuple

from .need import Need
from config import Config
from event_dispatcher import Event
from pet.state import PetState


class NeedsManager:
    """
    Owns the stat descriptors and the passive tick ("one hour passes").

    The tick is a pure function of the state and the random source; it never
    touches global state.
    """

    def __init__(self):
        """
        Initializes the NeedsManager with all defined needs.
        """
        self.needs = {}
        self.initialize_needs()

    def initialize_needs(self):
        """
        Initializes the needs based on the configuration.
        """
        self.needs['hunger'] = Need(
            name='hunger',
            label='Hunger',
            critical_threshold=Config.CRITICAL_HUNGER,
            critical_when_high=True,
            annotation='(High — critical!)'
        )
        self.needs['happiness'] = Need(
            name='happiness',
            label='Happiness',
            critical_threshold=Config.CRITICAL_HAPPINESS,
            critical_when_high=False,
            annotation='(Low — needs attention!)'
        )
        self.needs['health'] = Need(
            name='health',
            label='Health',
            critical_threshold=Config.CRITICAL_HEALTH,
            critical_when_high=False,
            annotation='(Low — urgent!)'
        )

    def get_need(self, need_name) -> Need:
        need = self.needs.get(need_name)
        if need:
            return need
        raise ValueError(f"Need '{need_name}' does not exist.")

    def critical_needs(self, state: PetState) -> List[Need]:
        """Needs whose current value is critical, in hunger/happiness/health order."""
        return [need for need in self.needs.values() if need.is_critical(need.value_of(state))]

    def pass_hour(self, state: PetState, rng) -> Tuple[PetState, List[Event]]:
        """
        Applies one passive tick.

        Order: announce, ambient decay, starvation penalty, sadness penalty,
        treat roll, then critical warnings against the adjusted values.

        Args:
            state (PetState): The state before the tick.
            rng: Random source with randint(a, b); drawn exactly once.

        Returns:
            tuple: (new state, events emitted by the tick)
        """
        name = state.name
        events = [Event("tick:hour_passed", {"name": name})]

        state = state.with_changes(
            hunger=Config.TICK_HUNGER_DELTA,
            happiness=Config.TICK_HAPPINESS_DELTA
        )

        if state.hunger >= Config.STARVING_THRESHOLD:
            state = state.with_changes(health=Config.STARVING_HEALTH_PENALTY)
            events.append(Event("tick:starving", {"name": name, "health": state.health}))

        if state.happiness <= Config.SADNESS_THRESHOLD:
            state = state.with_changes(health=Config.SADNESS_HEALTH_PENALTY)
            events.append(Event("tick:unhappy", {"name": name, "health": state.health}))

        roll = rng.randint(1, Config.TREAT_ROLL_SIDES)
        if roll == 1:
            state = state.with_changes(happiness=Config.TREAT_HAPPINESS_BONUS)
            events.append(Event("tick:treat_found", {
                "name": name,
                "happiness": state.happiness,
                "roll": roll
            }))

        for need in self.critical_needs(state):
            events.append(Event(f"tick:critical:{need.name}", {
                "name": name,
                "value": need.value_of(state)
            }))

        return state, events

    def get_needs_summary(self, state: PetState):
        """
        Gathers current needs information for the status readout.

        Returns:
            dict: need name -> value, maximum, critical flag and annotation
        """
        needs_summary = {}
        for need_name, need in self.needs.items():
            value = need.value_of(state)
            critical = need.is_critical(value)
            needs_summary[need_name] = {
                "label": need.label,
                "value": value,
                "max_value": need.max_value,
                "critical": critical,
                "annotation": need.annotation if critical else ""
            }
        return needs_summary
