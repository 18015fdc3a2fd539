# examples/mixed_length.py
import numpy as np

from vecmath import Vec2, Vector, promote

short = Vec2(1, 2, dtype=np.int32)
long = Vector([10.5, 20.0, 30.0, 40.0])

print("promote(int32, float64):", promote(np.int32, np.float64))
print("short + long:", repr(short + long))
print("long - short:", repr(long - short))
print("short * 3:", repr(short * 3))
print("normalized:", short.normalize())
print("zero normalized:", Vec2.zeros().normalize())
