# shared_models/pet_models.py
from pydantic import BaseModel
from typing import Dict

from config import Config


class StatReading(BaseModel):
    label: str
    value: int
    max_value: int = Config.STAT_MAX
    critical: bool = False
    annotation: str = ""


class StatusSnapshot(BaseModel):
    """
    Read-only view of a pet, carried by the status:snapshot event.
    """
    name: str
    pet_type: str
    stats: Dict[str, StatReading]
