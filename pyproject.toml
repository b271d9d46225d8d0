[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "khanij"
version = "1.1.0"
description = "Geology and mineralogy engine: minerals, rocks, sediment budgets, ore deposits, hydrothermal systems, hydrology and rock mechanics"
requires-python = ">=3.10"
keywords = ["geology", "minerals", "rocks", "sediment", "hydrology", "rock mechanics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["khanij"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
