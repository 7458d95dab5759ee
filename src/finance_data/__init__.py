"""Category data layer: repository, mapping and write notifications."""

__version__ = "0.1.0"
