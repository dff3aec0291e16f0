"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, drillkit.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from drillkit.domain.ratings import RATING_THRESHOLD
from drillkit.domain.squares import DEFAULT_DELAY_SECONDS


class RatingsConfig(BaseModel):
    """[ratings] section."""

    model_config = {"frozen": True}

    threshold: float = RATING_THRESHOLD


class SquareConfig(BaseModel):
    """[square] section."""

    model_config = {"frozen": True}

    delay_seconds: float = Field(default=DEFAULT_DELAY_SECONDS, ge=0)
