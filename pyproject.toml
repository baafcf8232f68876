[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmekit"
version = "0.1.0"
description = "Numerical helpers for particle mesh Ewald work: half-integral gamma functions, Cartesian multipole rotations, Jacobi diagonalisation, small dense matrices and tensor reordering."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "ewald",
    "pme",
    "incomplete-gamma",
    "exponential-integral",
    "multipoles",
    "jacobi-eigenvalue",
    "molecular-dynamics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pmekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
