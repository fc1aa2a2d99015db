[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alpsolver"
version = "0.1.0"
description = "Hill climbing with random restarts for the static aircraft landing problem"
requires-python = ">=3.10"
dependencies = []
keywords = ["aircraft landing", "scheduling", "hill climbing", "local search", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alpsolver = "alpsolver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["alpsolver"]

[tool.pytest.ini_options]
addopts = "-ra"
