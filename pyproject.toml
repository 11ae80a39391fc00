[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "micecat"
version = "0.1.0"
description = "Voxel terrain generation with Perlin noise, chunk storage and simple player physics helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["voxel", "perlin", "noise", "terrain", "chunks", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["micecat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
