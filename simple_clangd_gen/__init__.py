"""Generate clangd compilation databases from a declarative source layout."""

__version__ = "0.1.0"
