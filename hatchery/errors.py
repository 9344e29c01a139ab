"""Engine error hierarchy.

ConfigurationError means the probability tables are malformed and the
process must not start. EngineInputError subclasses are caller mistakes and
map to 4xx responses in the API layer.
"""


class HatcheryError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(HatcheryError):
    """Malformed or inconsistent game tables."""


class EngineInputError(HatcheryError):
    """A caller passed data the engine refuses to act on."""


class UnknownEggTypeError(EngineInputError):
    """No drop table is configured for the requested egg type."""

    def __init__(self, egg_type: str):
        super().__init__(f"Unknown egg type: {egg_type}")
        self.egg_type = egg_type


class InvalidRosterError(EngineInputError):
    """A battle side has no creatures."""


class InsufficientMaterialsError(EngineInputError):
    """Fusion materials do not meet the recipe for the target tier."""


class UnknownFusionTargetError(EngineInputError):
    """No fusion recipe produces the requested tier."""

    def __init__(self, target_tier):
        super().__init__(f"No fusion recipe for tier: {getattr(target_tier, 'name', target_tier)}")
        self.target_tier = target_tier
