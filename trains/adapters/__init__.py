"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Edge storage (comma separated token files)
"""
