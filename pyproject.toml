[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numbasics"
version = "0.1.0"
description = "Small number, text, statistics and matrix routines for learning the basics of programming"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "number theory", "primes", "matrix", "statistics", "conversion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numbasics = "numbasics.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numbasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
