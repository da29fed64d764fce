[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitlog"
version = "0.1.0"
description = "A small logging library with pattern formatters, file and rolling sinks, and synchronous or background-thread loggers"
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "async", "sink", "formatter", "rolling-file"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitlog-bench = "bitlog.bench:main"
bitlog-example = "bitlog.example:main"

[tool.hatch.build.targets.wheel]
packages = ["bitlog"]

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
