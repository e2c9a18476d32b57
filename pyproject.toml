[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expirycache"
version = "0.1.0"
description = "Thread-safe in-memory key/value cache with per-entry expiry and background garbage collection"
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "ttl", "expiry", "in-memory", "garbage-collection"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
expirycache-example = "expirycache.example:main"

[tool.hatch.build.targets.wheel]
packages = ["expirycache"]

[tool.pytest.ini_options]
addopts = "-ra"
