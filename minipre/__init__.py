"""minipre toolkit.

Provides CLI for preprocessing text files with `libminipre`.
"""

__version__ = "0.1.0"
