"""
Core type definitions for pagetree.

This module contains type aliases shared across the package.
"""

from typing import Any

Definition = dict[str, Any]
