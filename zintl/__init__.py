"""Declarative GUI toolkit core: unit-safe geometry, views, render trees, text layout and meshes."""

__version__ = "0.0.1a2"