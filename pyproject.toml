[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "indicators"
version = "0.1.0"
description = "Streaming technical-analysis indicators that update one price bar at a time"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "technical-analysis",
    "trading",
    "indicators",
    "moving-average",
    "macd",
    "rsi",
    "bollinger",
    "streaming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
indicators-benchmark = "indicators.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["indicators"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
