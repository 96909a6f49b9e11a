"""Weighted tables loaded from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from pydantic import BaseModel, Field

from .errors import EmptyCollectionError

LOGGER = logging.getLogger(__name__)


class WeightedEntry(BaseModel):
    """A single item and its relative selection weight."""

    item: Any
    weight: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)


class WeightTable(BaseModel):
    """Ordered collection of weighted entries."""

    name: Optional[str] = Field(default=None, description="Label used in logs.")
    entries: list[WeightedEntry] = Field(default_factory=list)

    def items(self) -> list[Any]:
        return [entry.item for entry in self.entries]

    def weights(self) -> list[float]:
        return [entry.weight for entry in self.entries]

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, float], *, name: Optional[str] = None) -> "WeightTable":
        return cls(
            name=name,
            entries=[WeightedEntry(item=item, weight=weight) for item, weight in mapping.items()],
        )


def load_weight_table(path: str | Path) -> WeightTable:
    """Load a weight table from a JSON or YAML file."""

    data = _read_file(path)
    table = WeightTable.model_validate(data)
    if not table.entries:
        raise EmptyCollectionError(f"weight table {path} contains no entries")
    LOGGER.info("Loaded weight table %s with %d entries", table.name or path, len(table.entries))
    return table


def _read_file(path: str | Path) -> Any:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required for YAML weight tables")
        return yaml.safe_load(payload) or {}
    return json.loads(payload)


__all__ = ["WeightTable", "WeightedEntry", "load_weight_table"]
