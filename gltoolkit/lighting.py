"""Directional light settings and normal generation for triangle meshes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]

_FLOATS_PER_VERTEX = 6


def _normalize(v: np.ndarray) -> np.ndarray:
    """Unit vector along ``v``; a zero vector yields NaN components."""
    with np.errstate(invalid="ignore", divide="ignore"):
        return v / np.linalg.norm(v)


def _normalize_rows(rows: np.ndarray) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return rows / np.linalg.norm(rows, axis=1, keepdims=True)


def _triangles(indices: Iterable[int], vertex_count: int) -> Iterator[Tuple[int, int, int]]:
    """Yield index triples, checking that every index names a vertex."""
    flat = [int(i) for i in indices]
    if len(flat) % 3:
        raise ValueError("Invalid index data: the index count is not a multiple of 3.")
    for start in range(0, len(flat), 3):
        triple = (flat[start], flat[start + 1], flat[start + 2])
        for index in triple:
            if not 0 <= index < vertex_count:
                raise IndexError(f"Index out of bounds: {index}")
        yield triple


def _face_normal(v0: np.ndarray, v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    return _normalize(np.cross(v1 - v0, v2 - v0))


def _vertex_rows(vertices: Iterable[float]) -> np.ndarray:
    data = np.asarray([float(v) for v in vertices], dtype=float)
    if data.size % _FLOATS_PER_VERTEX:
        raise ValueError("Invalid vertex data size.")
    return data.reshape(-1, _FLOATS_PER_VERTEX)


def calculate_vertex_normal(
    vertices: Sequence[Sequence[float]], indices: Iterable[int]
) -> np.ndarray:
    """Smooth normals for ``vertices`` (an n x 3 array of positions).

    Each vertex gets the normalised sum of the normals of the faces using it;
    a vertex used by no face gets NaN components.
    """
    points = np.asarray(vertices, dtype=float).reshape(-1, 3)
    normals = np.zeros_like(points)
    for i0, i1, i2 in _triangles(indices, len(points)):
        face = _face_normal(points[i0], points[i1], points[i2])
        normals[i0] += face
        normals[i1] += face
        normals[i2] += face
    return _normalize_rows(normals)


def calculate_vertex_normals(vertices: Iterable[float], indices: Iterable[int]) -> List[float]:
    """Smooth normals for interleaved position/colour data (six floats per vertex).

    Each output vertex holds eight floats: the position, the red and green
    colour components, and the normal.
    """
    rows = _vertex_rows(vertices)
    positions = rows[:, :3]
    normals = calculate_vertex_normal(positions, indices)
    return np.concatenate([positions, rows[:, 3:5], normals], axis=1).ravel().tolist()


def calculate_face_normals(vertices: Iterable[float], indices: Iterable[int]) -> List[float]:
    """Unshared vertices with flat normals for interleaved position/colour data.

    Every triangle contributes three vertices of nine floats each: position,
    colour and the triangle's normal.
    """
    rows = _vertex_rows(vertices)
    result: List[float] = []
    for triple in _triangles(indices, len(rows)):
        corners = [rows[i] for i in triple]
        normal = _face_normal(corners[0][:3], corners[1][:3], corners[2][:3])
        for corner in corners:
            result.extend(corner[:3].tolist())
            result.extend(corner[3:6].tolist())
            result.extend(normal.tolist())
    return result


@dataclass
class DirectionalLightBundle:
    """Colour, direction and intensities of a directional light."""

    direction: Vec3 = (1.0, -1.0, 0.0)
    color: Vec3 = (1.0, 1.0, 0.0)
    ambient: Vec3 = (1.0, 1.0, 0.0)
    diffuse: Vec3 = (1.0, 1.0, 0.0)
    specular: Vec3 = (1.0, 1.0, 0.0)
    amb_intensity: float = 0.1
    diff_intensity: float = 1.0
    spec_intensity: float = 1.0

    def clamp(self) -> "DirectionalLightBundle":
        """Limit the three intensities to [0, 1]; returns self."""
        self.amb_intensity = min(max(self.amb_intensity, 0.0), 1.0)
        self.diff_intensity = min(max(self.diff_intensity, 0.0), 1.0)
        self.spec_intensity = min(max(self.spec_intensity, 0.0), 1.0)
        return self