[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tuktrack"
version = "0.1.0"
description = "Fleet bookkeeping records and SQLite data access for auto-rickshaws: vehicles, drivers, shifts, deposits and maintenance."
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = [
    "rickshaw",
    "tuk-tuk",
    "fleet",
    "drivers",
    "deposits",
    "maintenance",
    "bookkeeping",
    "sqlite",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tuktrack"]

[tool.hatch.build.targets.sdist]
include = [
    "tuktrack",
    "tests",
    "pyproject.toml",
    "README.md",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
