"""Solutions to classic UVa Online Judge exercises, with judge-style runners and a command line."""

__version__ = "0.1.0"