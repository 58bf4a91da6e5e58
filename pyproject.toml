[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "popo"
version = "0.1.0"
description = "Generates Poisson disc samples inside a polygon"
requires-python = ">=3.10"
dependencies = []
keywords = ["poisson", "disc", "sampling", "polygon", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
popo-bench = "popo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["popo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
