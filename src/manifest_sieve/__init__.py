"""Manifest Sieve - filter multi-document YAML streams."""

__version__ = "0.1.0"
