"""Utils module.

This module provides shared exception classes.
"""
