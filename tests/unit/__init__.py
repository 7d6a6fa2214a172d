"""
Unit tests package.

Contains unit tests for the codec, configuration, logging, batch decoding and
CLI modules, each exercised in isolation.
"""
