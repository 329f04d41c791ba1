"""
Named designs kept in a QSettings key-value store.

All designs live as one JSON list under a single key, one record per design:

    {"id": 1700000000000, "name": "Blue zig-zag",
     "data": {"triangleColors": {"triangle-0-0-right": "#ff0000"},
              "selectedSize": "Twin", "triangleHeight": 3,
              "columns": 24, "rows": 26},
     "date": "2024-01-01T12:00:00.000Z"}
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
import logging
import time

from PySide6 import QtCore

from ..engine import GridParams, ParseError, PatternState

logger = logging.getLogger(__name__)

DEFAULT_KEY = "quiltDesigns"


class DesignFormatError(ValueError):
    """A stored design record is missing fields or has the wrong types."""


@dataclass
class DesignData:
    triangle_colors: dict[str, str] = field(default_factory=dict)
    selected_size: str = "Twin"
    triangle_height: float = 3.0
    columns: int = 0
    rows: int = 0

    def pattern(self) -> PatternState:
        return PatternState.from_dict(self.triangle_colors)

    def grid_params(self) -> GridParams:
        return GridParams(self.selected_size, self.triangle_height, self.columns, self.rows)

    @classmethod
    def capture(cls, pattern: PatternState, params: GridParams) -> "DesignData":
        return cls(pattern.to_dict(), params.size_name, params.triangle_height, params.columns, params.rows)

    def to_record(self) -> dict:
        return {
            "triangleColors": dict(self.triangle_colors),
            "selectedSize": self.selected_size,
            "triangleHeight": self.triangle_height,
            "columns": self.columns,
            "rows": self.rows,
        }

    @classmethod
    def from_record(cls, record) -> "DesignData":
        if not isinstance(record, dict):
            raise DesignFormatError("design data must be an object")

        colors = record.get("triangleColors")
        if not isinstance(colors, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in colors.items()):
            raise DesignFormatError("triangleColors must map id strings to color strings")

        size = record.get("selectedSize")
        height = record.get("triangleHeight")
        columns = record.get("columns")
        rows = record.get("rows")
        if not isinstance(size, str):
            raise DesignFormatError("selectedSize must be a string")
        if isinstance(height, bool) or not isinstance(height, (int, float)) or height <= 0:
            raise DesignFormatError(f"triangleHeight must be a positive number, got {height!r}")
        for name, value in (("columns", columns), ("rows", rows)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise DesignFormatError(f"{name} must be an integer, got {value!r}")

        return cls(dict(colors), size, float(height), columns, rows)


@dataclass
class Design:
    id: int
    name: str
    data: DesignData
    date: str

    @property
    def created(self) -> datetime:
        return datetime.fromisoformat(self.date.replace("Z", "+00:00"))

    def to_record(self) -> dict:
        return {"id": self.id, "name": self.name, "data": self.data.to_record(), "date": self.date}

    @classmethod
    def from_record(cls, record) -> "Design":
        """
        Validate and convert one stored record.

        Raises:
            DesignFormatError: if any field is missing, mistyped, or a
                triangle id in the colors does not parse
        """
        if not isinstance(record, dict):
            raise DesignFormatError("design record must be an object")

        design_id = record.get("id")
        name = record.get("name")
        date = record.get("date")
        if isinstance(design_id, bool) or not isinstance(design_id, int):
            raise DesignFormatError(f"id must be an integer, got {design_id!r}")
        if not isinstance(name, str) or not name.strip():
            raise DesignFormatError("name must be a non-empty string")
        if not isinstance(date, str):
            raise DesignFormatError("date must be an ISO-8601 string")

        data = DesignData.from_record(record.get("data"))
        try:
            data.pattern()
        except ParseError as e:
            raise DesignFormatError(str(e)) from e

        return cls(design_id, name, data, date)


def _iso_now() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class DesignStore:
    def __init__(self, settings: QtCore.QSettings, key: str = DEFAULT_KEY):
        self._settings = settings
        self._key = key

    def _read_records(self) -> list:
        raw = self._settings.value(self._key, "[]")
        if not isinstance(raw, str):
            logger.warning("Ignoring non-text value stored under %r", self._key)
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored designs under %r are not valid JSON: %s", self._key, e)
            return []
        if not isinstance(records, list):
            logger.warning("Stored designs under %r are not a list", self._key)
            return []
        return records

    def _write_records(self, records: list):
        self._settings.setValue(self._key, json.dumps(records))
        self._settings.sync()

    def designs(self) -> list[Design]:
        '''
        All readable designs, oldest first.

        A corrupt record is logged and left out rather than hiding every
        other design.
        '''
        designs = []
        for record in self._read_records():
            try:
                designs.append(Design.from_record(record))
            except DesignFormatError as e:
                logger.warning("Skipping stored design: %s", e)
        return designs

    def get(self, design_id: int) -> Design:
        for design in self.designs():
            if design.id == design_id:
                return design
        raise KeyError(design_id)

    def _next_id(self, records: list) -> int:
        # Creation time in ms, bumped past any existing id so two saves in the
        # same millisecond still get distinct ids.
        design_id = int(time.time() * 1000)
        existing = [r.get("id") for r in records if isinstance(r, dict) and isinstance(r.get("id"), int)]
        if existing and design_id <= max(existing):
            design_id = max(existing) + 1
        return design_id

    def save(self, name: str, data: DesignData) -> Design:
        if not name or not name.strip():
            raise ValueError("design name must not be empty")

        records = self._read_records()
        design = Design(self._next_id(records), name.strip(), data, _iso_now())
        records.append(design.to_record())
        self._write_records(records)
        logger.info("Saved design %r (id %d, %d painted triangles)",
                    design.name, design.id, len(data.triangle_colors))
        return design

    def delete(self, design_id: int) -> bool:
        records = self._read_records()
        kept = [r for r in records if not (isinstance(r, dict) and r.get("id") == design_id)]
        if len(kept) == len(records):
            return False
        self._write_records(kept)
        logger.info("Deleted design %d", design_id)
        return True
