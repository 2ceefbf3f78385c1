"""
ROMAN TIMELINE - Historical Timeline Geometry Core

Renders events from 509 BCE to 1453 CE on one pannable, zoomable axis.

Design Principles:
- Astronomical year numbering internally, BCE/CE with no year zero on display
- Domain is fixed; zoom is a post-transform, never a rescale
- One mutable entity (the viewport transform), read as a snapshot per render pass
- Deterministic: same data + same snapshot = identical frame
- Geometry only, no paint
"""

__version__ = "1.0.0"
