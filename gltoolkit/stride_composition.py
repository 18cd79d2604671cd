"""Process-wide choice of which vertex attributes are present."""

from __future__ import annotations

from typing import ClassVar, Optional

from gltoolkit.stride import ColorStride, NormalStride, PosStride, TextureStride


class StrideComposition:
    """Shared record of position, colour, texture and normal stride options."""

    _instance: ClassVar[Optional["StrideComposition"]] = None

    def __init__(self) -> None:
        self.pos = PosStride.NONE
        self.col = ColorStride.NONE
        self.tex = TextureStride.NONE
        self.norm = NormalStride.NONE
        self.initialized = False

    @classmethod
    def instance(cls) -> "StrideComposition":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_composition(
        self,
        pos: PosStride,
        col: ColorStride,
        tex: TextureStride,
        norm: NormalStride,
    ) -> None:
        self.pos = pos
        self.col = col
        self.tex = tex
        self.norm = norm
        self.initialized = True