"""NiceGUI showcase for the Imaginify design system.

This package is intentionally optional: it requires the `frontend` extra.
Importing `imaginify.ui` should not eagerly import NiceGUI.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
