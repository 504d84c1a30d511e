"""Render helpers.

This package maps a bearing to drawing primitives (dial) and replays them
on a surface (QPainter). The layout itself does not touch Qt unless the
default text metrics are requested.
"""

from __future__ import annotations
