[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freelie"
version = "0.1.0"
description = "Commutator terms, formal indeterminates, BCH coefficient helpers and coloured rooted trees for the free Lie algebra"
requires-python = ">=3.10"
dependencies = []
keywords = ["lie", "algebra", "commutator", "bch", "baker-campbell-hausdorff", "rooted-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["freelie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
