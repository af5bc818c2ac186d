"""Postboard: accounts and posts over HTTP with bearer-token authentication."""

__version__ = "0.1.0"
