"""
unitlex Command-Line Interface
==============================

This package provides command-line tools for unitlex:

- **unitlex-tokens**: Scan a definitions file and print its tokens

Each tool is implemented as a Click-based CLI application with
help text and consistent exit codes.
"""

__all__ = ["tokens"]
