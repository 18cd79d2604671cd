[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gltoolkit"
version = "0.1.0"
description = "Windowless building blocks for real-time 3D rendering: input bindings, cameras, vertex strides, geometry and lighting math"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["camera", "input", "key-bindings", "geometry", "lighting", "normals", "rendering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gltoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
