[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "loresgfx"
version = "0.1.0"
description = "Minimal software graphics library for low-resolution games: images, palettes, blitting, drawing, image decorators and sprites."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["graphics", "pixel-art", "sprites", "blit", "palette", "normal-map", "games"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["loresgfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
