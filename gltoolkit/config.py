"""Shader file locations shared by the whole program."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Config:
    """Paths to the vertex, fragment and geometry shader sources."""

    vert_shader_path: Path = field(default_factory=lambda: Path("shaders/shader.vert"))
    frag_shader_path: Path = field(default_factory=lambda: Path("shaders/shader.frag"))
    geom_shader_path: Path = field(default_factory=lambda: Path("shaders/shader.geom"))

    _instance: ClassVar[Optional["Config"]] = None

    @classmethod
    def instance(cls) -> "Config":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance