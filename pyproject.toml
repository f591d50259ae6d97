[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "render"
version = "0.1.0"
description = "A small raster canvas with shape and text drawing and a composable layout tree of render objects"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["canvas", "raster", "drawing", "layout", "rendering", "png"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
render = "render.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["render"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
