[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bayesfilters"
version = "0.10.0"
description = "Building blocks for recursive Bayesian filtering: Gaussian mixtures, directional statistics, estimate extraction and filter scaffolding."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "bayesian filtering",
    "gaussian mixture",
    "particle filter",
    "state estimation",
    "directional statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["bayesfilters"]

[tool.pytest.ini_options]
addopts = "-ra"
