"""An insertion-ordered hash set with indexed access, set operations and sorting."""

__version__ = "0.1.0"