"""minischeme Language Server package.

This package provides:
- A pygls-based Language Server for minischeme source files.
- A lightweight indexer that scans documents for top-level defines without evaluation.

Note: The server never evaluates user buffers; it only reads them.
"""

__all__ = [
    "server",
    "indexer",
]
