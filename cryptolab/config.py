"""
config.py

Algorithm constants and the pydantic settings model for the randomized
operations (primality rounds, sampling ranges, overflow mode, retry cap).
"""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================================================
# Constants
# ============================================================================

FERMAT_ROUNDS = 100          # Witnesses drawn per primality test
UNIFORM_RANGE = (1, 1000)    # Operand range for the uniform pair
PRIME_RANGE = (2, 1000)      # Candidate range for the prime pair


# ============================================================================
# Settings model
# ============================================================================

class SamplingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    seed: Optional[int] = Field(None, description="Seed for the random source (None = OS entropy)")
    fermat_rounds: int = Field(FERMAT_ROUNDS, ge=1, description="Fermat witnesses per primality test")
    uniform_low: int = Field(UNIFORM_RANGE[0], ge=1, description="Lower bound of the uniform pair range")
    uniform_high: int = Field(UNIFORM_RANGE[1], description="Upper bound of the uniform pair range")
    prime_low: int = Field(PRIME_RANGE[0], ge=2, description="Lower bound of prime candidates")
    prime_high: int = Field(PRIME_RANGE[1], ge=3, description="Upper bound of prime candidates")
    strict_mod_exp: bool = Field(False, description="Reduce every product in mod_exp (no int64 overflow)")
    max_attempts: Optional[int] = Field(None, ge=1, description="Cap on rejection-sampling draws (None = unbounded)")

    @model_validator(mode="after")
    def _check_ranges(self) -> "SamplingConfig":
        if self.uniform_low > self.uniform_high:
            raise ValueError("uniform_low must not exceed uniform_high")
        if self.prime_low > self.prime_high:
            raise ValueError("prime_low must not exceed prime_high")
        return self


DEFAULT_CONFIG = SamplingConfig()


def load_config(path: Union[str, Path]) -> SamplingConfig:
    """
    Load a SamplingConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a field is missing its constraints
    """
    return SamplingConfig.model_validate_json(Path(path).read_text())
