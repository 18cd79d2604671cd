"""Vertex and index data for simple shapes."""

from __future__ import annotations

import math
from typing import List


def _require_positive(name: str, value: int) -> None:
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def create_sphere_vertices(radius: float, num_segments: int, num_rings: int) -> List[float]:
    """Sphere vertices, nine floats each: position, normal, colour (1, 1, 0).

    The normal is the (unnormalised) position itself.
    """
    _require_positive("num_segments", num_segments)
    _require_positive("num_rings", num_rings)
    vertices: List[float] = []
    for y in range(num_rings + 1):
        phi = math.pi * (y / num_rings)
        for x in range(num_segments + 1):
            theta = 2.0 * math.pi * (x / num_segments)
            position = (
                radius * math.cos(theta) * math.sin(phi),
                radius * math.cos(phi),
                radius * math.sin(theta) * math.sin(phi),
            )
            vertices.extend(position)
            vertices.extend(position)
            vertices.extend((1.0, 1.0, 0.0))
    return vertices


def create_sphere_indices(num_segments: int, num_rings: int) -> List[int]:
    """Triangle indices for the grid made by :func:`create_sphere_vertices`."""
    _require_non_negative("num_segments", num_segments)
    _require_non_negative("num_rings", num_rings)
    indices: List[int] = []
    for y in range(num_rings):
        for x in range(num_segments):
            first = y * (num_segments + 1) + x
            second = first + num_segments + 1
            indices.extend((first, second, first + 1))
            indices.extend((second, second + 1, first + 1))
    return indices


def create_circle_vertices(radius: float, num_segments: int) -> List[float]:
    """Flat circle vertices, six floats each: position and colour.

    The centre comes first, coloured (1, 1, 0); the rim follows, coloured
    (1, 0, 0), with its first point repeated at the end.
    """
    _require_positive("num_segments", num_segments)
    vertices: List[float] = [0.0, 0.0, 0.0, 1.0, 1.0, 0.0]
    for i in range(num_segments + 1):
        theta = 2.0 * math.pi * i / num_segments
        vertices.extend((radius * math.cos(theta), radius * math.sin(theta), 0.0))
        vertices.extend((1.0, 0.0, 0.0))
    return vertices


def create_circle_indices(num_segments: int) -> List[int]:
    """Triangle-fan indices for :func:`create_circle_vertices`, closed at the end."""
    _require_non_negative("num_segments", num_segments)
    indices: List[int] = []
    for i in range(1, num_segments + 1):
        indices.extend((0, i, i + 1))
    indices.extend((0, num_segments + 1, 1))
    return indices