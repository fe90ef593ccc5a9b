[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigidsim"
version = "0.1.0"
description = "A small 2D rigid-body physics engine with circles, rectangles and static line borders, plus an interactive pygame viewer."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "rigid-body", "collision", "bvh", "2d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rigidsim = "rigidsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rigidsim"]

[tool.pytest.ini_options]
addopts = "-ra"
