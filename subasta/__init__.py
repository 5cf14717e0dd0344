"""A console auction manager with highest-offer tracking, plus small example programs."""

__version__ = "0.1.0"
__all__ = ["auction", "cli", "movies", "recording", "hello"]