"""Vertex attribute stride descriptions and their component counts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class Stride(IntEnum):
    NONE = 0
    STRIDE_2D = 1
    STRIDE_3D = 2
    STRIDE_4D = 3


class FullStride(IntEnum):
    NONE = 0
    STRIDE_2D = 2
    STRIDE_3D = 3
    STRIDE_4D = 4
    STRIDE_5D = 5
    STRIDE_6D = 6
    STRIDE_7D = 7
    STRIDE_8D = 8
    STRIDE_9D = 9
    STRIDE_10D = 10
    STRIDE_11D = 11
    STRIDE_12D = 12


class PosStride(IntEnum):
    NONE = 0
    STRIDE_2D = 1
    STRIDE_3D = 2


class ColorStride(IntEnum):
    NONE = 0
    RGB = 1
    RGBA = 2


class NormalStride(IntEnum):
    NONE = 0
    STRIDE_2D = 1
    STRIDE_3D = 2


class TextureStride(IntEnum):
    NONE = 0
    STRIDE_2D = 1
    STRIDE_3D = 2


class StrideType(IntEnum):
    POS = 0
    COL = 1
    NORM = 2
    TEX = 3


class BufferLayout(IntEnum):
    BUFFER_1 = 0
    BUFFER_2 = 1
    BUFFER_3 = 2
    BUFFER_4 = 3


@dataclass
class ArrayBufferLayout:
    """One vertex attribute: what it holds, its width and its location."""

    type: StrideType
    stride: Stride
    location: int = 0


@dataclass
class StrideBundle:
    pos: PosStride
    col: ColorStride
    norm: NormalStride
    tex: TextureStride


_POS_COUNTS = {PosStride.NONE: 0, PosStride.STRIDE_2D: 2, PosStride.STRIDE_3D: 3}
_COLOR_COUNTS = {ColorStride.NONE: 0, ColorStride.RGB: 2, ColorStride.RGBA: 3}
_TEX_COUNTS = {TextureStride.NONE: 0, TextureStride.STRIDE_2D: 2, TextureStride.STRIDE_3D: 3}
_NORMAL_COUNTS = {NormalStride.NONE: 0, NormalStride.STRIDE_2D: 2, NormalStride.STRIDE_3D: 3}
_STRIDE_COUNTS = {Stride.NONE: 0, Stride.STRIDE_2D: 2, Stride.STRIDE_3D: 3, Stride.STRIDE_4D: 4}


def enumerate_pos_stride(stride: PosStride) -> int:
    return _POS_COUNTS.get(stride, 0)


def enumerate_color_stride(stride: ColorStride) -> int:
    return _COLOR_COUNTS.get(stride, 0)


def enumerate_tex_stride(stride: TextureStride) -> int:
    return _TEX_COUNTS.get(stride, 0)


def enumerate_normal_stride(stride: NormalStride) -> int:
    return _NORMAL_COUNTS.get(stride, 0)


def enumerate_stride(stride: Union[Stride, FullStride]) -> int:
    """Number of float components for a ``Stride`` or ``FullStride``."""
    if isinstance(stride, FullStride):
        return 0 if stride is FullStride.NONE else int(stride)
    if isinstance(stride, Stride):
        return _STRIDE_COUNTS[stride]
    raise TypeError(f"expected Stride or FullStride, got {type(stride).__name__}")


# Vector widths accepted by the type-driven helpers; None stands for "absent".
_VECTOR_SIZES = (None, 2, 3, 4)


def _check_size(size: Optional[int]) -> None:
    if size not in _VECTOR_SIZES:
        raise ValueError(f"unsupported vector size: {size!r}")


def _enumify(size, table, default, label):
    _check_size(size)
    if size in table:
        return table[size]
    logger.warning("Error: an unknown type was entered for %s!", label)
    return default


def enumify_pos_type(size: Optional[int]) -> PosStride:
    table = {2: PosStride.STRIDE_2D, 3: PosStride.STRIDE_3D, None: PosStride.NONE}
    return _enumify(size, table, PosStride.NONE, "Position Stride")


def enumify_col_type(size: Optional[int]) -> ColorStride:
    table = {4: ColorStride.RGBA, 3: ColorStride.RGB, None: ColorStride.NONE}
    return _enumify(size, table, ColorStride.NONE, "Color Stride")


def enumify_norm_type(size: Optional[int]) -> NormalStride:
    table = {2: NormalStride.STRIDE_2D, 3: NormalStride.STRIDE_3D, None: NormalStride.NONE}
    return _enumify(size, table, NormalStride.NONE, "Normal Stride")


def enumify_tex_type(size: Optional[int]) -> TextureStride:
    table = {2: TextureStride.STRIDE_2D, 3: TextureStride.STRIDE_3D, None: TextureStride.NONE}
    return _enumify(size, table, TextureStride.NONE, "Texture Stride")


def enumerate_type(size: Optional[int]) -> int:
    """Component count of a vector width; ``None`` gives 0."""
    _check_size(size)
    return 0 if size is None else size


def enumify_type(size: Optional[int]) -> Stride:
    table = {2: Stride.STRIDE_2D, 3: Stride.STRIDE_3D, 4: Stride.STRIDE_4D, None: Stride.NONE}
    return _enumify(size, table, Stride.NONE, "Stride")