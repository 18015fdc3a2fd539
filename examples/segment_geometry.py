# examples/segment_geometry.py
from vecmath import Matrix, PI_4, Segment2, Vec2

seg = Segment2((0.0, 0.0), (10.0, 0.0))
p = Vec2(20.0, -3.0)

print("segment:", seg)
print("length:", seg.length(), "center:", seg.center(), "direction:", seg.direction())
print("distance to line:", seg.distance_to_point(p))
print("distance to segment:", seg.clamped_distance(p))

rot = Matrix.rotation(PI_4)
print(rot)
print("rotated end point:", rot @ seg.b)
