[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teslkit"
version = "0.1.0"
description = "Lexing helpers, Unicode codecs, symbol tables and wyhash for small language runtimes"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "number parsing", "utf-8", "utf-16", "utf-32", "symbol table", "wyhash"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["teslkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
