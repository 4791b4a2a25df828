[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platnav"
version = "0.1.0"
description = "Navigation meshes and A* pathfinding for tile-based platformer agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["platformer", "pathfinding", "navigation mesh", "a-star", "tilemap", "game ai"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["platnav"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
