[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gophkeeper"
version = "0.1.0"
description = "Keeper for logins, texts, binary data and card details: client cache, service logic and command parser, plus SQLite-backed server storage"
requires-python = ">=3.10"
dependencies = []
keywords = ["password manager", "secrets", "credentials", "cache", "keeper", "sqlite"]
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
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gophkeeper"]

[tool.hatch.build.targets.sdist]
include = ["gophkeeper", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
