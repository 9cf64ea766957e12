"""Presentation-order generator for multi-round events.

Assigns a roster of presenters to equally sized, numbered rounds so that every
presenter's placement constraint holds, searching by randomized rejection
sampling under a time budget.
"""

from __future__ import annotations

__version__ = "0.1.0"
