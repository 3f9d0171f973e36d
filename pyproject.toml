[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "corosch"
version = "1.0.0"
description = "Dependency-aware schedulers for cooperative coroutine tasks: central queue, priority queue and per-worker queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduler",
    "coroutines",
    "generators",
    "task graph",
    "work stealing",
    "thread pool",
    "dag",
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
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
corosch-circuit = "corosch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["corosch"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
