"""Random streams and draw primitives.

Every random decision in the engine goes through a RandomDraw bound to one
RandomStream. A seeded stream makes a whole hatch, battle or fusion
replayable. A stream must not be shared between concurrent callers: the
draw order would become nondeterministic.
"""

import math
import random
from typing import Iterable, Mapping, Optional, Protocol, Sequence, TypeVar, Union

from hatchery.errors import ConfigurationError

T = TypeVar("T")

# Constants of the generator shared with the game client
PARITY_MULTIPLIER = 9301
PARITY_INCREMENT = 49297
PARITY_MODULUS = 233280


class RandomStream(Protocol):
    """Source of uniform floats in [0, 1)."""

    def next(self) -> float:
        ...


class SystemStream:
    """Non-deterministic stream backed by the OS entropy source."""

    def __init__(self):
        self._random = random.SystemRandom()

    def next(self) -> float:
        return self._random.random()


class SeededStream:
    """Reproducible stream backed by ``random.Random``."""

    def __init__(self, seed: int):
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


class ParityStream:
    """Linear congruential stream identical to the game client's seeded RNG.

    A roll made server-side with this stream can be replayed by the client
    from the same seed. Its period is short (at most 233280 draws), so use
    SeededStream for statistics.
    """

    def __init__(self, seed: int):
        # The client treats seed 0 as unseeded, so it could not replay the roll
        if seed < 1:
            raise ValueError("Parity seeds must be positive")
        self.seed = seed
        self._state = seed

    def next(self) -> float:
        self._state = (self._state * PARITY_MULTIPLIER + PARITY_INCREMENT) % PARITY_MODULUS
        return self._state / PARITY_MODULUS


def make_stream(seed: Optional[int] = None, parity: bool = False) -> RandomStream:
    """Build a stream: system entropy without a seed, seeded otherwise."""
    if seed is None:
        return SystemStream()
    if parity:
        return ParityStream(seed)
    return SeededStream(seed)


class RandomDraw:
    """Draw primitives over a single stream.

    Each primitive consumes exactly one value from the stream, so callers
    can reason about draw order when replaying.
    """

    def __init__(self, stream: Optional[RandomStream] = None):
        self.stream = stream if stream is not None else SystemStream()
        self.draws = 0

    def draw_uniform(self) -> float:
        """Uniform float in [0, 1)."""
        value = self.stream.next()
        if not 0.0 <= value < 1.0:
            raise ValueError(f"Random stream produced {value}, outside [0, 1)")
        self.draws += 1
        return value

    def draw_weighted(
        self, categories: Union[Mapping[T, float], Iterable[tuple[T, float]]]
    ) -> T:
        """
        Pick a label with probability proportional to its weight.

        Builds the cumulative table in declaration order, scales one uniform
        draw by the total and returns the first label whose cumulative bound
        reaches the draw. Zero-weight labels are never returned.

        Args:
            categories: Ordered (label, weight) pairs or a mapping.

        Raises:
            ConfigurationError: No categories, a negative or non-finite weight,
                or a zero or non-finite total. There is no uniform fallback.
        """
        items = list(categories.items()) if isinstance(categories, Mapping) else list(categories)
        if not items:
            raise ConfigurationError("Cannot draw from an empty weight table")

        cumulative = []
        total = 0.0
        last_positive = None
        for label, weight in items:
            if not math.isfinite(weight):
                raise ConfigurationError(f"Non-finite weight {weight} for {label!r}")
            if weight < 0:
                raise ConfigurationError(f"Negative weight {weight} for {label!r}")
            total += weight
            cumulative.append((label, weight, total))
            if weight > 0:
                last_positive = label
        if not math.isfinite(total):
            raise ConfigurationError(f"Weight table sums to {total}")
        if total <= 0:
            raise ConfigurationError("Weight table sums to zero")

        target = self.draw_uniform() * total
        for label, weight, bound in cumulative:
            if weight > 0 and bound >= target:
                return label

        # Float rounding can leave target a hair above the last bound
        return last_positive

    def draw_int_in_range(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], inclusive."""
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        span = high - low + 1
        return low + min(int(self.draw_uniform() * span), span - 1)

    def draw_choice(self, items: Sequence[T]) -> T:
        """Uniform pick from a non-empty sequence."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.draw_int_in_range(0, len(items) - 1)]
