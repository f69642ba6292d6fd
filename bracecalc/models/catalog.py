"""Rating catalog models.

A catalog groups bracing *types* under named *systems*.  Every type carries
two rating tables (wind and earthquake) mapping a string key to a rating in
bracing units (BU).  Keys are either numeric-string lengths, read as step
boundaries, or the single number-based key ``n_1`` for per-unit ratings.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bracecalc.config import NUMBER_BASED_KEY

RatingTable = dict[str, float | None]


def _coerce_rating(value: Any) -> float | None:
    """Return *value* as a finite float, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(number):
        return None
    return number


def is_number_based(table: RatingTable) -> bool:
    """True if the first declared key of *table* is the number-based key."""
    return next(iter(table), None) == NUMBER_BASED_KEY


class BracingType(BaseModel):
    """One catalog entry with its wind and earthquake rating tables."""

    model_config = ConfigDict(frozen=True)

    name: str
    wind: RatingTable = Field(default_factory=dict)
    eq: RatingTable = Field(default_factory=dict)

    @field_validator("wind", "eq", mode="before")
    @classmethod
    def _lenient_table(cls, value: Any) -> RatingTable:
        # Malformed tables degrade to "no rating" instead of failing the load
        if not isinstance(value, dict):
            return {}
        return {str(k): _coerce_rating(v) for k, v in value.items()}

    @property
    def is_number_based(self) -> bool:
        """Rated per unit (pile, portal) rather than per length."""
        return is_number_based(self.wind)


class BracingSystem(BaseModel):
    """A named group of bracing types (manufacturer or category)."""

    model_config = ConfigDict(frozen=True)

    name: str
    types: list[BracingType] = Field(default_factory=list)

    def get_type(self, name: str) -> BracingType | None:
        """Return the first type called *name*, or None."""
        for bracing_type in self.types:
            if bracing_type.name == name:
                return bracing_type
        return None


class BracingData(BaseModel):
    """The full rating catalog."""

    model_config = ConfigDict(frozen=True)

    systems: list[BracingSystem] = Field(default_factory=list)

    def get_system(self, name: str) -> BracingSystem | None:
        """Return the first system called *name*, or None."""
        for system in self.systems:
            if system.name == name:
                return system
        return None

    def get_type(self, system: str, type_name: str) -> BracingType | None:
        """Look up a type by system and type name.

        A missing system or type returns None; callers treat that as
        "no rating available".
        """
        found = self.get_system(system)
        if found is None:
            return None
        return found.get_type(type_name)


class CustomBracing(BaseModel):
    """A user-authored bracing type.  Ratings are always present."""

    name: str
    wind: dict[str, float] = Field(default_factory=dict)
    eq: dict[str, float] = Field(default_factory=dict)

    @property
    def is_number_based(self) -> bool:
        return is_number_based(self.wind)

    def to_bracing_type(self) -> BracingType:
        """Convert to a catalog entry."""
        return BracingType(name=self.name, wind=dict(self.wind), eq=dict(self.eq))
