"""Tiger language interned symbols, source locations and abstract syntax tree."""

__version__ = "0.1.0"