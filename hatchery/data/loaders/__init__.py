# Data Loaders
from .table_loader import (
    DATA_DIR,
    read_tables,
    load_game_tables,
    load_default_tables,
    clear_cache,
)

__all__ = [
    "DATA_DIR",
    "read_tables",
    "load_game_tables",
    "load_default_tables",
    "clear_cache",
]
