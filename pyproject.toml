[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blink"
version = "0.1.0"
description = "A small structured logger with pluggable formatters, handlers and level hooks"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "structured-logging", "hooks", "json", "logger"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blink-demo = "blink.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["blink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
