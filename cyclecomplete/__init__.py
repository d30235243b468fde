"""CycleComplete: inline word completion from the words of the current document."""

__version__ = "1.0.0"
