"""Keys, typed events, event routing, an event bus, resource handles and media URIs for ARI."""

__version__ = "0.1.0"