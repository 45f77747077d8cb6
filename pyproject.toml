[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starforge"
version = "0.1.0"
description = "Game objects, delta synchronisation, job threading, scene caching and HUD overlay geometry for a space-building simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "space", "delta", "overlay", "threading"]
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
packages = ["starforge"]

[tool.pytest.ini_options]
addopts = "-ra"
