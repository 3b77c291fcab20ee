[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workbench"
version = "0.1.0"
description = "Classic sorting algorithms, SDBM hashing, thread-safe queues and buffers, a sorted timer list and a metro route planner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "hashing",
    "sdbm",
    "producer-consumer",
    "blocking-queue",
    "bounded-buffer",
    "timer",
    "dijkstra",
    "route-planning",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
workbench-queues = "workbench.queues:main"
workbench-metro = "workbench.planner:main"

[tool.hatch.build.targets.wheel]
packages = ["workbench"]

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
