"""
Common API schemas.
"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional


class SeededRequest(BaseModel):
    """Base for requests that consume randomness.

    With a seed the result is reproducible; ``parity`` selects the
    generator the game client uses so the client can replay the roll.
    Parity seeds start at 1.
    """

    seed: Optional[int] = Field(default=None, ge=0)
    parity: bool = False

    @model_validator(mode="after")
    def _check_parity_seed(self):
        if self.parity and self.seed == 0:
            raise ValueError("parity seeds must be at least 1")
        return self
