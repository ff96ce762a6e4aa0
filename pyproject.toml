[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "babaengine"
version = "0.1.0"
description = "A rule-rewriting grid puzzle engine with a terminal front end and an HTTP control API"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "grid", "rules", "engine", "http-api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
babaengine = "babaengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["babaengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
