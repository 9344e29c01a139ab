"""Game table loader.

Tables ship as JSON files inside the package. A different directory can be
passed (or set through TABLES_DIR in the API settings) to run the engine
against other balance data.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from hatchery.core.tables import GameTables
from hatchery.errors import ConfigurationError


logger = logging.getLogger(__name__)

# Get the data directory path
DATA_DIR = Path(__file__).parent.parent / "tables"
TIERS_FILE = "tiers.json"
TYPES_FILE = "types.json"
EGGS_FILE = "eggs.json"
ABILITIES_FILE = "abilities.json"
RULES_FILE = "rules.json"


def _read_json(path: Path) -> dict:
    """Read one table file, turning I/O and syntax problems into ConfigurationError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Missing table file: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Malformed table file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Table file {path} must contain an object")
    return data


def _section(data: dict, key: str, path: Path) -> dict:
    if key not in data:
        raise ConfigurationError(f"Table file {path} has no '{key}' section")
    section = data[key]
    if not isinstance(section, dict):
        raise ConfigurationError(f"Section '{key}' in {path} must be an object")
    return section


def _ability_pools(abilities: dict, path: Path) -> dict:
    """Tag each ability with the type it is listed under."""
    pools = {}
    for affinity, pool in abilities.items():
        if not isinstance(pool, list) or not all(isinstance(a, dict) for a in pool):
            raise ConfigurationError(f"Ability pool '{affinity}' in {path} must be a list of objects")
        pools[affinity] = [{"type": affinity, **ability} for ability in pool]
    return pools


def _keyed(entries: dict, key_field: str) -> dict:
    """Copy each entry with its mapping key filled in as ``key_field``."""
    keyed = {}
    for key, value in entries.items():
        if not isinstance(value, dict):
            raise ConfigurationError(f"Table entry {key} must be an object")
        keyed[key] = {key_field: key, **value}
    return keyed


def read_tables(tables_dir: Optional[Union[str, Path]] = None) -> dict:
    """Read every table file into one plain dictionary.

    Args:
        tables_dir: Directory holding the JSON files. Defaults to the
            packaged tables.

    Returns:
        Dictionary accepted by ``GameTables.from_dict``.
    """
    base = Path(tables_dir) if tables_dir else DATA_DIR

    tiers_path = base / TIERS_FILE
    types_path = base / TYPES_FILE
    eggs_path = base / EGGS_FILE
    abilities_path = base / ABILITIES_FILE
    rules_path = base / RULES_FILE

    tiers = _section(_read_json(tiers_path), "tiers", tiers_path)
    types = _section(_read_json(types_path), "types", types_path)
    eggs_data = _read_json(eggs_path)
    abilities = _section(_read_json(abilities_path), "abilities", abilities_path)
    rules = _read_json(rules_path)
    fusion = _section(rules, "fusion", rules_path)
    recipes = _section(fusion, "recipes", rules_path) if "recipes" in fusion else {}
    rewards = _section(rules, "rewards", rules_path) if "rewards" in rules else {}

    return {
        "tiers": _keyed(tiers, "tier"),
        "types": _keyed(types, "type"),
        "eggs": _keyed(_section(eggs_data, "eggs", eggs_path), "id"),
        "pity": _section(eggs_data, "pity", eggs_path),
        "abilities": _ability_pools(abilities, abilities_path),
        "stat_ranges": _section(rules, "stat_ranges", rules_path),
        "fusion": {**fusion, "recipes": _keyed(recipes, "target_tier")},
        "rewards": rewards,
    }


def load_game_tables(tables_dir: Optional[Union[str, Path]] = None) -> GameTables:
    """Load and validate game tables.

    Raises:
        ConfigurationError: A file is missing or malformed, or the tables
            fail validation.
    """
    tables = GameTables.from_dict(read_tables(tables_dir))
    logger.info(
        "Loaded game tables from %s: %d tiers, %d types, %d egg types",
        tables_dir or DATA_DIR,
        len(tables.tiers),
        len(tables.types),
        len(tables.eggs),
    )
    return tables


@lru_cache(maxsize=1)
def load_default_tables() -> GameTables:
    """Packaged tables, loaded once per process."""
    return load_game_tables()


def clear_cache() -> None:
    """Clear the default table cache. Useful for testing."""
    load_default_tables.cache_clear()
