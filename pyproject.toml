[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "almondkit"
version = "0.1.4"
description = "Small game-engine building blocks: coroutines, logging, thread pool, plugins, entity history and grid simulations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-engine",
    "simulation",
    "cellular-automaton",
    "game-of-life",
    "falling-sand",
    "snake",
    "thread-pool",
    "plugins",
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["almondkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
