"""
Configuration for the quilt designer.

Start-up choices (quilt preset, triangle height, paint color), where saved
designs are kept, and logging verbosity. Stored as JSON.
"""

from dataclasses import dataclass
import json
import logging
from pathlib import Path
import re

from .constants.quilt import (
    QUILT_SIZES, TRIANGLE_SIZES, DEFAULT_QUILT_SIZE, DEFAULT_TRIANGLE_HEIGHT, DEFAULT_PAINT_COLOR,
)

DEFAULT_CONFIG_PATH = Path.home() / ".quiltdesigner.json"

_HEX_COLOR = re.compile(r'#[0-9a-fA-F]{6}')


@dataclass
class QuiltConfig:
    """
    Configuration for a designer session.

    Attributes:
        quilt_size: Quilt preset selected at start (key of QUILT_SIZES)
        triangle_height: Triangle height in inches selected at start
        paint_color: Initial paint color, "#rrggbb"
        show_instructions: Show the how-to dialog when the window opens
        settings_organization: QSettings organization holding saved designs
        settings_application: QSettings application holding saved designs
        storage_key: QSettings key the design list is stored under
        log_level: Name of the logging level
    """
    quilt_size: str = DEFAULT_QUILT_SIZE
    triangle_height: float = DEFAULT_TRIANGLE_HEIGHT
    paint_color: str = DEFAULT_PAINT_COLOR

    show_instructions: bool = True

    # Design storage
    settings_organization: str = "QuiltDesigner"
    settings_application: str = "Quilt Designer"
    storage_key: str = "quiltDesigns"

    log_level: str = "INFO"

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.quilt_size, str) or self.quilt_size not in QUILT_SIZES:
            errors.append(f"quilt_size must be one of {', '.join(QUILT_SIZES)}, got {self.quilt_size!r}")

        if self.triangle_height not in TRIANGLE_SIZES:
            errors.append(f"triangle_height must be one of {TRIANGLE_SIZES}, got {self.triangle_height}")

        if not isinstance(self.paint_color, str) or not _HEX_COLOR.fullmatch(self.paint_color):
            errors.append(f"paint_color must look like #rrggbb, got {self.paint_color!r}")

        if not self.storage_key:
            errors.append("storage_key must not be empty")

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            errors.append(f"log_level is not a logging level: {self.log_level!r}")

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "quilt_size": self.quilt_size,
            "triangle_height": self.triangle_height,
            "paint_color": self.paint_color,
            "show_instructions": self.show_instructions,
            "settings_organization": self.settings_organization,
            "settings_application": self.settings_application,
            "storage_key": self.storage_key,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "QuiltConfig":
        """Create from dictionary. Missing keys keep their defaults."""
        if not isinstance(data, dict):
            raise TypeError(f"config must be a JSON object, got {type(data).__name__}")
        defaults = cls()
        return cls(
            quilt_size=data.get("quilt_size", defaults.quilt_size),
            triangle_height=float(data.get("triangle_height", defaults.triangle_height)),
            paint_color=data.get("paint_color", defaults.paint_color),
            show_instructions=bool(data.get("show_instructions", defaults.show_instructions)),
            settings_organization=data.get("settings_organization", defaults.settings_organization),
            settings_application=data.get("settings_application", defaults.settings_application),
            storage_key=data.get("storage_key", defaults.storage_key),
            log_level=data.get("log_level", defaults.log_level),
        )

    def save(self, filepath: Path | str) -> None:
        """Save configuration to JSON file."""
        filepath = Path(filepath)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path | str) -> "QuiltConfig":
        """Load configuration from JSON file."""
        filepath = Path(filepath)
        if not filepath.exists():
            return cls()  # Return defaults if file doesn't exist

        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)
