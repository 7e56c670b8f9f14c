"""Bank policy review demonstration."""

__version__ = "0.1.0"
