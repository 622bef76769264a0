[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clickwire"
version = "0.1.0"
description = "Typed columnar blocks, type names and the binary wire encoding of the ClickHouse native protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["clickhouse", "database", "columnar", "native-protocol", "serialization"]
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
    "Topic :: Database :: Front-Ends",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clickwire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
