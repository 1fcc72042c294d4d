"""Matrices, vectors, rotations and force platform analysis for C3D motion-capture data."""

__version__ = "0.1.0"

__all__ = ["forceplatform", "matrix", "matrix44", "rotation", "rotations", "square", "vector"]