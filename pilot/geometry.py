import math

def distance(p1, p2) -> float:
    return math.sqrt((p1[0] - p2[0])**2 + (p1[1] - p2[1])**2)

def normalize_angle(angle: float) -> float:
    """Reduce an angle in degrees to (-180, 180]."""
    angle %= 360.0
    if angle > 180.0:
        angle -= 360.0
    return angle

def bearing_to(origin, target, heading: float) -> float:
    """
    Signed angle in degrees from `heading` to the direction origin -> target,
    normalized to (-180, 180].

    Coincident points have no direction; the bearing is then 0 so callers
    steer straight instead of propagating NaN.
    """
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    if dx == 0 and dy == 0:
        return 0.0
    return normalize_angle(math.degrees(math.atan2(dy, dx)) - heading)

def angle_difference(a: float, b: float) -> float:
    """Absolute difference between two headings, in [0, 180]."""
    return abs(normalize_angle(a - b))
