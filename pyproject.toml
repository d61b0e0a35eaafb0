[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dragontiger"
version = "0.1.0"
description = "Interned symbols, source locations and the abstract syntax tree of the Tiger language"
requires-python = ">=3.10"
dependencies = []
keywords = ["tiger", "compiler", "ast", "symbols", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dragontiger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
