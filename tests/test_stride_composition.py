from gltoolkit.stride import ColorStride, NormalStride, PosStride, TextureStride
from gltoolkit.stride_composition import StrideComposition


def test_instance_is_shared():
    first = StrideComposition.instance()
    first.set_composition(
        PosStride.STRIDE_3D, ColorStride.RGBA, TextureStride.STRIDE_3D, NormalStride.STRIDE_2D
    )
    second = StrideComposition.instance()
    assert second.tex is TextureStride.STRIDE_3D
    assert second.norm is NormalStride.STRIDE_2D


def test_new_composition_is_not_initialized():
    comp = StrideComposition()
    assert comp.initialized is False
    assert comp.pos is PosStride.NONE


def test_set_composition_stores_values():
    comp = StrideComposition()
    comp.set_composition(
        PosStride.STRIDE_3D, ColorStride.RGBA, TextureStride.STRIDE_2D, NormalStride.STRIDE_3D
    )
    assert comp.initialized is True
    assert comp.pos is PosStride.STRIDE_3D
    assert comp.col is ColorStride.RGBA
    assert comp.tex is TextureStride.STRIDE_2D
    assert comp.norm is NormalStride.STRIDE_3D


def test_shared_instance_keeps_composition():
    StrideComposition.instance().set_composition(
        PosStride.STRIDE_2D, ColorStride.RGB, TextureStride.NONE, NormalStride.NONE
    )
    shared = StrideComposition.instance()
    assert shared.initialized
    assert shared.pos is PosStride.STRIDE_2D
    assert shared.col is ColorStride.RGB