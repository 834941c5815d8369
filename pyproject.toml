[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beestrap"
version = "0.1.0"
description = "Bees In The Trap: a small turn-based terminal game against a hive of bees"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "turn-based", "bees"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
beestrap = "beestrap.client:main"

[tool.hatch.build.targets.wheel]
packages = ["beestrap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
