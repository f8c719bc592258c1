"""Lazy, chainable query operators over Python iterables; see lazyquery.query."""

__version__ = "0.1.0"
__all__ = ["query"]