"""Interactive filter for narrowing down Wordle candidates."""
__version__ = "1.0"
