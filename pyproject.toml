[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pysuals"
version = "0.1.0"
description = "CSS processing, a lexer, an indentation checker and a small line-based language server for PySuals component files"
requires-python = ">=3.10"
dependencies = []
keywords = ["css", "minify", "scoped-css", "vendor-prefix", "lexer", "language-server", "lsp"]
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pysuals-lsp = "pysuals.lsp.server:main"

[tool.hatch.build.targets.wheel]
packages = ["pysuals"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
