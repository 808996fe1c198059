"""config-relay: HTTP relay with proxy and config formatting modes."""

__version__ = "0.1.0"
