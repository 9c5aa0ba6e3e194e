[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacetensor"
version = "0.1.0"
description = "Numerical tensor calculus for general relativity: tensors, curvature, Newton-Raphson steps and electromagnetic stress-energy"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tensor",
    "general relativity",
    "riemann",
    "ricci",
    "christoffel",
    "electromagnetism",
    "newton-raphson",
]
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
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spacetensor"]

[tool.pytest.ini_options]
addopts = "-ra"
