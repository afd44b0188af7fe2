"""Tooling for PySuals component files: CSS processing, lexing and a language server."""

__version__ = "0.1.0"