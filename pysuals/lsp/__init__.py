"""A line-based JSON-RPC language server for PySuals files, and its providers."""