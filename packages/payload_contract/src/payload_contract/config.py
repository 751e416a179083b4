from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MULTIPLE_OF_TOLERANCE = 1e-9
DEFAULT_MAX_DEPTH = 64


class ValidatorSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Relative slack allowed when checking multipleOf on non-integers; 0 means exact remainder.
    multiple_of_tolerance: float = Field(default=DEFAULT_MULTIPLE_OF_TOLERANCE, ge=0)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)

    @classmethod
    def from_env(cls) -> ValidatorSettings:
        return cls(
            multiple_of_tolerance=float(
                os.environ.get("PAYLOAD_CONTRACT_MULTIPLE_OF_TOLERANCE", str(DEFAULT_MULTIPLE_OF_TOLERANCE))
            ),
            max_depth=int(os.environ.get("PAYLOAD_CONTRACT_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))),
        )
