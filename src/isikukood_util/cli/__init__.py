"""CLI module.

This module provides the isikukood command-line interface.
"""
