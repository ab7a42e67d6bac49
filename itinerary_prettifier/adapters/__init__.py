"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Airport reference storage (CSV files)
- Output presentation (plain text, styled terminal text)
"""
