"""Two-color triangle quilt pattern designer."""

__version__ = "0.1.0"
