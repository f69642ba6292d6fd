"""CustomBracingStore — create, update and delete user-defined bracing types.

Custom types are identified by name.  The store is the editing boundary:
it rejects empty and duplicate names so the calculation engine can assume
every custom entry is valid.

When constructed with a path, the store persists to a JSON file::

    {"version": "1", "bracings": [{"name": ..., "wind": {...}, "eq": {...}}]}

Every mutating call rewrites the file atomically (temp file then rename).
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from bracecalc.config import NUMBER_BASED_KEY
from bracecalc.models.catalog import CustomBracing

logger = logging.getLogger(__name__)


class CustomBracingError(ValueError):
    """A custom bracing entry was rejected."""


class DuplicateBracingError(CustomBracingError):
    """A custom bracing with this name already exists."""


class InvalidBracingNameError(CustomBracingError):
    """The bracing name is empty."""


def build_custom_bracing(
    name: str,
    values: list[dict[str, Any]],
    number_based: bool = False,
) -> CustomBracing:
    """Convert editor form rows into a :class:`CustomBracing`.

    Parameters
    ----------
    name:
        Bracing name.  Surrounding whitespace is removed.
    values:
        Form rows of the shape ``{"key": "2.4", "wind": 100, "eq": 90}``.
    number_based:
        If True, only the first row is used and stored under ``n_1``.
        Otherwise rows with an empty key are skipped.

    Raises
    ------
    InvalidBracingNameError
        If *name* is empty after trimming.
    """
    trimmed = name.strip()
    if not trimmed:
        raise InvalidBracingNameError("Bracing name cannot be empty.")

    wind: dict[str, float] = {}
    eq: dict[str, float] = {}

    if number_based:
        first = values[0] if values else {}
        wind[NUMBER_BASED_KEY] = float(first.get("wind") or 0)
        eq[NUMBER_BASED_KEY] = float(first.get("eq") or 0)
    else:
        for row in values:
            key = str(row.get("key") or "").strip()
            if not key:
                continue
            wind[key] = float(row.get("wind") or 0)
            eq[key] = float(row.get("eq") or 0)

    return CustomBracing(name=trimmed, wind=wind, eq=eq)


def to_form_values(bracing: CustomBracing) -> tuple[list[dict[str, Any]], bool]:
    """Inverse of :func:`build_custom_bracing`.

    Returns ``(values, number_based)``.  A length-based entry with no keys
    yields one blank row so the form always has something to edit.
    """
    if bracing.is_number_based:
        return (
            [
                {
                    "key": NUMBER_BASED_KEY,
                    "wind": bracing.wind.get(NUMBER_BASED_KEY, 0.0),
                    "eq": bracing.eq.get(NUMBER_BASED_KEY, 0.0),
                }
            ],
            True,
        )

    values = [
        {"key": key, "wind": bracing.wind[key], "eq": bracing.eq.get(key, 0.0)}
        for key in bracing.wind
    ]
    if not values:
        values = [{"key": "", "wind": 0.0, "eq": 0.0}]
    return values, False


class CustomBracingStore:
    """Name-keyed collection of custom bracing types.

    Parameters
    ----------
    path:
        JSON file to persist to.  *None* keeps the collection in memory.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._bracings: dict[str, CustomBracing] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.path is None or not self.path.is_file():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            bracings = [CustomBracing.model_validate(b) for b in data.get("bracings", [])]
        except (json.JSONDecodeError, AttributeError, ValidationError):
            logger.warning("Corrupt custom bracing store at %s, starting fresh", self.path)
            return
        self._bracings = {b.name: b for b in bracings}

    def _save(self) -> None:
        if self.path is None:
            return
        payload = {
            "version": "1",
            "bracings": [b.model_dump(mode="json") for b in self._bracings.values()],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=self.path.parent, prefix=".custom_bracings_", suffix=".json"
        )
        try:
            with open(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            Path(tmp).replace(self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    # -- queries --------------------------------------------------------------

    def list_all(self) -> list[CustomBracing]:
        """All custom bracings in creation order."""
        return list(self._bracings.values())

    def get(self, name: str) -> CustomBracing | None:
        return self._bracings.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._bracings

    def __len__(self) -> int:
        return len(self._bracings)

    # -- mutations ------------------------------------------------------------

    def create(self, bracing: CustomBracing) -> CustomBracing:
        """Add a new custom bracing.

        Raises
        ------
        InvalidBracingNameError
            If the name is empty.
        DuplicateBracingError
            If a custom bracing with the same name exists.
        """
        bracing = self._normalised(bracing)
        if bracing.name in self._bracings:
            raise DuplicateBracingError("This bracing name already exists.")
        self._bracings[bracing.name] = bracing
        self._save()
        logger.info("Created custom bracing %s", bracing.name)
        return bracing

    def update(self, bracing: CustomBracing) -> CustomBracing:
        """Replace the ratings of an existing custom bracing.

        The name is the identity and cannot change.

        Raises
        ------
        KeyError
            If no custom bracing has this name.
        """
        bracing = self._normalised(bracing)
        if bracing.name not in self._bracings:
            raise KeyError(f"Custom bracing not found: {bracing.name}")
        self._bracings[bracing.name] = bracing
        self._save()
        logger.info("Updated custom bracing %s", bracing.name)
        return bracing

    def save(self, bracing: CustomBracing, *, editing: bool = False) -> CustomBracing:
        """Create when *editing* is False, otherwise update."""
        if editing:
            return self.update(bracing)
        return self.create(bracing)

    def delete(self, name: str) -> bool:
        """Remove a custom bracing.  Returns False if it did not exist."""
        if self._bracings.pop(name, None) is None:
            return False
        self._save()
        logger.info("Deleted custom bracing %s", name)
        return True

    @staticmethod
    def _normalised(bracing: CustomBracing) -> CustomBracing:
        name = bracing.name.strip()
        if not name:
            raise InvalidBracingNameError("Bracing name cannot be empty.")
        if name == bracing.name:
            return bracing
        return bracing.model_copy(update={"name": name})
