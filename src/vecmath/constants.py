# MIT License (see LICENSE)
"""
Angle constants in radians.
"""
from __future__ import annotations

PI: float = 3.1415926535897932
PI2: float = PI * 2   # full turn

PI_2: float = PI / 2  # quarter turn
PI_3: float = PI / 3
PI_4: float = PI / 4
PI_6: float = PI / 6
