"""gradectl — score validation, letter grading and performance reporting."""

__version__ = "0.1.0"
