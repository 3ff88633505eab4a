[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpgraphics"
version = "1.0.0"
description = "A small software raster canvas with drawing primitives, 2D polygon clipping and BMP/XWD image files."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "clipping",
    "sutherland-hodgman",
    "canvas",
    "bmp",
    "xwd",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fpgraphics"]

[tool.hatch.build.targets.sdist]
include = ["fpgraphics", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
