"""deadlink - find dead and permanently redirected links in text documents."""

__version__ = "0.1.0"
