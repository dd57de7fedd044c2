"""
project: cavegen
module: __init__.py
License: MIT

Deterministic cellular-automaton cave generation.

The generation pipeline lives in :mod:`cavegen.cave`; this top-level package
only carries shared helpers (structured logging).
"""

__version__ = "0.1.0"
