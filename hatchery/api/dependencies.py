"""
Dependency injection for API services.
"""

from functools import lru_cache

from hatchery.core.tables import GameTables
from hatchery.data.loaders import load_game_tables

from .config import settings
from .services.egg_service import EggService
from .services.battle_service import BattleService
from .services.fusion_service import FusionService


@lru_cache()
def get_game_tables() -> GameTables:
    """Load game tables once per process."""
    return load_game_tables(settings.TABLES_DIR)


@lru_cache()
def get_egg_service() -> EggService:
    """Get EggService singleton."""
    return EggService(get_game_tables())


@lru_cache()
def get_battle_service() -> BattleService:
    """Get BattleService singleton."""
    return BattleService(get_game_tables())


@lru_cache()
def get_fusion_service() -> FusionService:
    """Get FusionService singleton."""
    return FusionService(get_game_tables())
