"""Input bindings, cameras, vertex strides, geometry and lighting helpers for 3D rendering."""

__version__ = "0.1.0"