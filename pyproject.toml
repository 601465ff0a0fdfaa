[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgkit"
version = "0.1.0"
description = "Status values, an LRU cache, a trie, vector distances, a repeating timer, a spin lock and task descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["status", "lru", "trie", "distance", "timer", "spin lock", "singleton"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
