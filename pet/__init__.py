# pet/__init__.py

from .state import (
    PET_TYPES,
    InvalidPetTypeError,
    PetState,
    capitalize,
    clamp_stat,
    create_pet,
    is_alive,
    normalize_pet_type,
    resolve_name,
)
