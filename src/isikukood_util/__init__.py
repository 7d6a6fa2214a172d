"""Isikukood Utility - Estonian personal identification code toolkit.

Generates, decodes and validates 11-digit personal codes ("isikukood").
"""

__version__ = "0.1.0"
