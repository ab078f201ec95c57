[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "caesar"
version = "0.1.0"
description = "Undirected multigraphs, cubic graph reduction and Tait edge coloring"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "multigraph", "edge coloring", "cubic graph", "tait coloring", "bicolor cycle"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[tool.hatch.build.targets.wheel]
packages = ["caesar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
