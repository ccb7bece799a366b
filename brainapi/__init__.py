"""Analytics proxy for the Trading Economics Comtrade search endpoint."""

__version__ = "0.1.0"
