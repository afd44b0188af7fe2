"""Lexer and indentation checking for PySuals source."""