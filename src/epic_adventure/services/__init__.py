"""Service layer exports."""

from .errors import FactoryError
from .adventure_service import AdventureService, CrossroadView, PathChoice
from .combat_service import CombatService
from .progression_service import ProgressionService
from .rescue_service import RescueScene

__all__ = [
    "FactoryError",
    "AdventureService",
    "CombatService",
    "CrossroadView",
    "PathChoice",
    "ProgressionService",
    "RescueScene",
]
