[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookdb"
version = "1.0.0"
description = "An in-memory book catalogue with sorting, filtering and rating statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["books", "catalogue", "database", "statistics", "library"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookdb = "bookdb.cli:main"
bookdb-benchmark = "bookdb.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["bookdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
