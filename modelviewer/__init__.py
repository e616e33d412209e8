"""Viewer for Wavefront OBJ models with an orbit camera and OpenGL rendering."""

__version__ = "0.1.0"
__all__ = ["camera", "controls", "engine", "files", "mesh", "model", "renderer", "shader"]