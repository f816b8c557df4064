[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctoys"
version = "0.1.0"
description = "Small compiler front-end pieces: C constant scanning, C keywords, a bracket checker and an expression parser"
requires-python = ">=3.10"
dependencies = []
keywords = ["c", "lexer", "parser", "constants", "brackets", "expressions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ctoys-expr = "ctoys.exprparse:main"
ctoys-brackets = "ctoys.bracketscan:main"

[tool.hatch.build.targets.wheel]
packages = ["ctoys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
