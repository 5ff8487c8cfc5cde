"""Wireframe viewer and loader for Wavefront OBJ meshes."""

__version__ = "0.1.0"