"""K2P min-max distance matrices between species groups of aligned DNA sequences."""

__version__ = "0.1.0"