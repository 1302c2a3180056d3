"""Core utilities for embedkit.

This package contains the ambient components shared by every driver:
- config: Configuration loading and provider settings
- network: HTTP session and single-attempt document fetches
- naming: Handle generation and display naming conventions
"""

__all__ = [
    "config",
    "network",
    "naming",
]
