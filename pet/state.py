# pet/state.py

"""
PetState module.

PetState is an immutable value: the three bounded stats plus the pet's
identity. Every change produces a new PetState through `with_changes`, and
every stat passes through `clamp_stat` on the way in.
"""

from dataclasses import dataclass, replace

from config import Config

PET_TYPES = Config.PET_TYPES


class InvalidPetTypeError(ValueError):
    """Raised when a pet type outside PET_TYPES is requested."""


def clamp_stat(value: int) -> int:
    """Clamp a stat to the inclusive range [STAT_MIN, STAT_MAX]."""
    return max(Config.STAT_MIN, min(Config.STAT_MAX, int(value)))


def capitalize(text: str) -> str:
    """
    Display form of a name or type: trimmed, first letter upper, rest lower.

    Blank input is returned unchanged.
    """
    if not text or not text.strip():
        return text
    text = text.strip()
    return text[0].upper() + text[1:].lower()


def normalize_pet_type(raw: str) -> str:
    """
    Normalize user input to one of PET_TYPES.

    Raises:
        InvalidPetTypeError: if the trimmed, lowercased input is not a known type.
    """
    pet_type = (raw or "").strip().lower()
    if pet_type not in PET_TYPES:
        raise InvalidPetTypeError(f"Unknown pet type '{raw}'. Choose one of: {', '.join(PET_TYPES)}")
    return pet_type


def resolve_name(raw: str) -> str:
    """Trimmed name, or the configured default when blank."""
    name = (raw or "").strip()
    return name or Config.get_default_pet_name()


@dataclass(frozen=True)
class PetState:
    """
    Single source of truth for one pet.

    Fields:
        pet_type: Display-capitalized type, e.g. "Cat".
        name: Display-capitalized name.
        hunger: 1 = full, 10 = starving.
        happiness: 1 = very sad, 10 = ecstatic.
        health: 1 = very poor, 10 = excellent.
    """
    pet_type: str
    name: str
    hunger: int = Config.INITIAL_HUNGER
    happiness: int = Config.INITIAL_HAPPINESS
    health: int = Config.INITIAL_HEALTH

    def __post_init__(self) -> None:
        # frozen, so bypass __setattr__ to clamp in place
        for stat in ("hunger", "happiness", "health"):
            object.__setattr__(self, stat, clamp_stat(getattr(self, stat)))

    def with_changes(self, **deltas: int) -> "PetState":
        """
        Return a copy with each named stat shifted by its delta and clamped.

        Example:
            state.with_changes(hunger=-3, health=1)
        """
        updates = {stat: getattr(self, stat) + delta for stat, delta in deltas.items()}
        return replace(self, **updates)

    def stats(self) -> dict:
        return {"hunger": self.hunger, "happiness": self.happiness, "health": self.health}

    def is_alive(self) -> bool:
        # Unreachable under the clamp floor of 1; kept as the literal rule.
        return self.health > 0


def create_pet(pet_type: str, name: str) -> PetState:
    """
    Create a pet with the starting stats.

    Args:
        pet_type: One of PET_TYPES, already validated by the caller.
        name: Non-blank name, default already substituted by the caller.
    """
    return PetState(pet_type=capitalize(pet_type), name=capitalize(name))


def is_alive(state: PetState) -> bool:
    return state.is_alive()
