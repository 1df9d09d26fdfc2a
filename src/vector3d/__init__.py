"""Immutable three-dimensional vector value type."""

from .vector_3d import Vector3D, ZeroMagnitudeError

__all__ = ["Vector3D", "ZeroMagnitudeError"]
