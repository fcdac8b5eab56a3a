[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "candycrisis"
version = "3.0.2"
description = "Game logic for a falling-candy puzzle game: board, pieces, placement, scoring, next-piece preview, dialog text and preferences."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "falling blocks", "match", "candy"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["candycrisis"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
