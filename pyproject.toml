[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logkeeper"
version = "0.1.0"
description = "A small leveled logger with console and size-rotated file sinks, plus a command that reads the log files back as a table"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "log analysis", "sinks", "rotation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
logkeeper-analyse = "logkeeper.analyser:main"
logkeeper-demo = "logkeeper.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["logkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
