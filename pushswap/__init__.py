"""Two-stack integer sorting: a solver that emits operations and a checker."""

__version__ = "0.1.0"