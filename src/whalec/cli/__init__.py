"""
Whale-C Command-Line Interface
==============================

- **whalec**: parse a source file and print its tokens or AST

The tool is a Click-based application with built-in help.
"""

__all__ = ["whalec"]
