[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ashmow"
version = "0.1.0"
description = "Control runtime for a robot lawn mower: threaded contexts, event and timer services, GNSS sensors, grid maps and services built from an XML config."
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = [
    "robot",
    "lawn mower",
    "gnss",
    "ubx",
    "event bus",
    "grid map",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ashmow = "ashmow.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ashmow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
