"""Array, number and text-pattern drills, with a command that prints worked examples."""

__version__ = "0.1.0"
__all__ = ["arrays", "questions", "subarray", "numbers", "patterns", "demo"]