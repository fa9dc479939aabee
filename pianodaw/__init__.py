"""A small digital audio workstation with a song roll, piano roll and mixer."""

__version__ = "0.1.0"

__all__ = ["__version__"]