[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumpparticles"
version = "0.1.0"
description = "Bouncing particle simulation with gravity, elastic collisions, buttons and a mouse magnet"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["particles", "physics", "simulation", "collisions", "gravity", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
jumpparticles = "jumpparticles.game:main"

[tool.hatch.build.targets.wheel]
packages = ["jumpparticles"]

[tool.pytest.ini_options]
addopts = "-ra"
