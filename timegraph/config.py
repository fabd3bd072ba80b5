"""Configuration classes for timegraph components."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union, get_args, get_origin, get_type_hints

import yaml


@dataclass
class IngestConfig:
    """Layout of the flight records CSV."""

    # Zero-based column positions
    day_column: int = 0
    origin_column: int = 1
    destination_column: int = 2
    time_column: int = 4

    # Timestamp of a record is day * day_multiplier + time
    day_multiplier: int = 10000

    delimiter: str = ","

    def __post_init__(self) -> None:
        for name in ("day_column", "origin_column", "destination_column", "time_column"):
            if getattr(self, name) < 0:
                raise ValueError(f"'{name}' must be >= 0, got {getattr(self, name)}")
        if self.day_multiplier < 1:
            raise ValueError(f"'day_multiplier' must be >= 1, got {self.day_multiplier}")
        if not self.delimiter:
            raise ValueError("'delimiter' must not be empty")

    def timestamp(self, day: int, time: int) -> int:
        """Combine a day number and a time of day into one sortable timestamp."""
        return int(day) * self.day_multiplier + int(time)


@dataclass
class SearchConfig:
    """Limits applied to path searches."""

    # Maximum nodes settled per search; None means unbounded
    max_expansions: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(
                f"'max_expansions' must be >= 0, got {self.max_expansions}"
            )


@dataclass
class Config:
    ingest: IngestConfig = field(default_factory=IngestConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


def _matches(value: Any, hint: Any) -> bool:
    """Return True if a YAML value fits a field annotation.

    Booleans are rejected for ``int`` fields even though ``bool`` subclasses it.
    """
    if get_origin(hint) is Union:
        return any(_matches(value, arg) for arg in get_args(hint))
    if hint is type(None):
        return value is None
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, hint)


def _section(cls: type, data: Any, name: str) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' must be a mapping")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(map(str, data)) - known)
    if unknown:
        raise ValueError(f"Unknown keys in '{name}': {', '.join(unknown)}")

    hints = get_type_hints(cls)
    for key, value in data.items():
        if not _matches(value, hints[key]):
            raise ValueError(
                f"'{name}.{key}' has invalid value {value!r} "
                f"({type(value).__name__})"
            )
    return cls(**data)


def load_config(path: Path) -> Config:
    """Load a YAML configuration file.

    The file may contain ``ingest:`` and ``search:`` mappings whose keys match
    the fields of `IngestConfig` and `SearchConfig`. Missing sections keep
    their defaults.

    Args:
        path: Path to the YAML file.

    Returns:
        Config: The parsed configuration.

    Raises:
        ValueError: If the document is not a mapping, names unknown keys, or
            holds a value of the wrong type or out of range.
    """
    data: Dict[str, Any] = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")
    unknown = sorted(set(map(str, data)) - {"ingest", "search"})
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(unknown)}")
    return Config(
        ingest=_section(IngestConfig, data.get("ingest"), "ingest"),
        search=_section(SearchConfig, data.get("search"), "search"),
    )


# Global configuration instances
INGEST_CONFIG = IngestConfig()
SEARCH_CONFIG = SearchConfig()
