"""A small 2D game framework on pygame with states, entities, LDtk tile-map collisions and letterboxed rendering."""

__version__ = "0.1.0"