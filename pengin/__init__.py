"""Entity-component storage, systems, field serialization and scene data for a small 2D game engine."""

__version__ = "0.1.0"