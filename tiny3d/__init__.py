"""Wireframe 3D toolkit: vectors, matrices, quaternions, lighting, OBJ loading and PGM canvases."""

__version__ = "0.1.0"