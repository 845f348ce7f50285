[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballphysics"
version = "0.1.0"
description = "A small 2D physics sandbox: bouncing balls, rotated rectangles, gravity and mutual attraction"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "simulation", "collision", "gravity", "2d", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ballphysics = "ballphysics.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ballphysics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
