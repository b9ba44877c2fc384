[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zintl"
version = "0.0.1a2"
description = "A small declarative GUI toolkit core: unit-safe geometry, views and render trees, text layout into a glyph atlas, and mesh tessellation."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["gui", "ui", "layout", "text", "tessellation", "glyph", "atlas", "mesh"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zintl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
