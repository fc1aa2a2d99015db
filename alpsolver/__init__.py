"""Hill climbing with random restarts for the aircraft landing problem."""

__version__ = "0.1.0"
__all__ = ["__version__"]