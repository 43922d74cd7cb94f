[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faultmgr"
version = "0.0.1"
description = "Diagnostic fault manager building blocks: operation cycles, enabling conditions, fault catalogs, DTC status, fault codes and timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["diagnostics", "dtc", "sovd", "iso-14229", "uds", "fault-management", "automotive"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["faultmgr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
