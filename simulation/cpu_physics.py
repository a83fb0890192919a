import math
from config import (BOOST_THRUST, CHECKPOINT_RADIUS, FRICTION, MAX_THRUST, MAX_TURN_DEGREES,
                    MIN_IMPULSE, POD_RADIUS, SHIELD_COOLDOWN, SHIELD_MASS, TIMEOUT_STEPS)
from pilot.pod import Telemetry

class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def distance(self, p):
        return math.sqrt((self.x - p.x)**2 + (self.y - p.y)**2)

    def distance2(self, p):
        return (self.x - p.x)**2 + (self.y - p.y)**2

class Unit(Point):
    def __init__(self, x, y, vx=0, vy=0, mass=1.0, radius=0.0):
        super().__init__(x, y)
        self.vx = vx
        self.vy = vy
        self.mass = mass
        self.radius = radius

class Checkpoint(Point):
    def __init__(self, x, y, id):
        super().__init__(x, y)
        self.id = id
        self.radius = CHECKPOINT_RADIUS

def segment_hits_circle(x0, y0, x1, y1, cx, cy, radius):
    """True if the segment (x0,y0)-(x1,y1) passes within `radius` of (cx,cy)."""
    dx = x1 - x0
    dy = y1 - y0
    length2 = dx * dx + dy * dy
    if length2 == 0:
        t = 0.0
    else:
        t = ((cx - x0) * dx + (cy - y0) * dy) / length2
        t = max(0.0, min(1.0, t))
    px = x0 + t * dx
    py = y0 + t * dy
    return (px - cx)**2 + (py - cy)**2 < radius * radius

class Pod(Unit):
    def __init__(self, id, team_id, x, y, angle=0.0):
        super().__init__(x, y, vx=0, vy=0, mass=1.0, radius=POD_RADIUS)
        self.id = id
        self.team_id = team_id
        self.angle = angle # In degrees
        self.next_checkpoint_id = 1
        self.checkpoints_passed = 0
        self.laps = 0
        self.shield = 0 # Turns left without thrust
        self.boost_available = True
        self.timeout = TIMEOUT_STEPS

        # Action buffer
        self.target_x = x
        self.target_y = y
        self.command = "0"

        # Per-turn counters
        self.boosts_used = 0
        self.shields_raised = 0

    def set_command(self, x, y, command):
        """Buffer a referee-style order: target point and "0".."100", "BOOST" or "SHIELD"."""
        self.target_x = x
        self.target_y = y
        self.command = str(command)

    def telemetry(self) -> Telemetry:
        return Telemetry(int(self.x), int(self.y), int(self.vx), int(self.vy),
                         int(round(self.angle)) % 360, self.next_checkpoint_id)

    def rotate(self):
        # 1. Rotate towards the target (clamped +- 18 degrees)
        dx = self.target_x - self.x
        dy = self.target_y - self.y
        if dx == 0 and dy == 0:
            return
        diff = math.degrees(math.atan2(dy, dx)) - self.angle
        while diff <= -180: diff += 360
        while diff > 180: diff -= 360
        diff = max(-MAX_TURN_DEGREES, min(MAX_TURN_DEGREES, diff))

        self.angle += diff
        while self.angle < 0: self.angle += 360
        while self.angle >= 360: self.angle -= 360

    def apply_thrust(self):
        # 2. Resolve the command into a thrust value and mass
        self.mass = 1.0
        thrust = 0.0
        if self.command == "SHIELD":
            # x10 mass this turn, no thrust for the following turns
            self.mass = SHIELD_MASS
            self.shield = SHIELD_COOLDOWN
            self.shields_raised += 1
        elif self.shield > 0:
            self.shield -= 1
        elif self.command == "BOOST":
            if self.boost_available:
                thrust = BOOST_THRUST
                self.boost_available = False
                self.boosts_used += 1
            else:
                thrust = MAX_THRUST
        else:
            thrust = max(0, min(MAX_THRUST, int(self.command)))

        angle_rad = math.radians(self.angle)
        self.vx += thrust * math.cos(angle_rad)
        self.vy += thrust * math.sin(angle_rad)

    def move(self, checkpoints):
        # 3. Move, checking the swept segment against the next checkpoint
        x0, y0 = self.x, self.y
        self.x += self.vx
        self.y += self.vy

        cp = checkpoints[self.next_checkpoint_id]
        if segment_hits_circle(x0, y0, self.x, self.y, cp.x, cp.y, cp.radius):
            self.pass_checkpoint(len(checkpoints))

    def pass_checkpoint(self, num_checkpoints):
        self.checkpoints_passed += 1
        self.timeout = TIMEOUT_STEPS
        if self.next_checkpoint_id == 0:
            self.laps += 1
        self.next_checkpoint_id = (self.next_checkpoint_id + 1) % num_checkpoints

    def end_frame(self):
        # 5. Apply Friction
        self.vx *= FRICTION
        self.vy *= FRICTION

        # Truncate
        self.vx = int(self.vx)
        self.vy = int(self.vy)

        # 6. Round Position
        self.x = round(self.x)
        self.y = round(self.y)

        # Update Timeout
        self.timeout -= 1

def solve_collisions(pods, iterations=4):
    """
    Elastic impulses for every overlapping pair, computed from the state at
    the start of each pass and applied together.
    """
    for _ in range(iterations):
        adjustments = {p.id: [0.0, 0.0, 0.0, 0.0] for p in pods} # dvx, dvy, dx, dy

        pairs_colliding = []
        for i in range(len(pods)):
            for j in range(i + 1, len(pods)):
                p1 = pods[i]
                p2 = pods[j]
                if p1.distance2(p2) < (p1.radius + p2.radius)**2:
                    pairs_colliding.append((p1, p2))

        if not pairs_colliding:
            break

        for p1, p2 in pairs_colliding:
            dist = p1.distance(p2)
            if dist == 0: continue # Avoid div by zero

            nx = (p2.x - p1.x) / dist
            ny = (p2.y - p1.y) / dist

            dvx = p1.vx - p2.vx
            dvy = p1.vy - p2.vy

            # Impact force along the normal, applied once to stop the approach
            # and again (at least MIN_IMPULSE) to bounce
            product = dvx * nx + dvy * ny
            m1_inv = 1.0 / p1.mass
            m2_inv = 1.0 / p2.mass
            f = product / (m1_inv + m2_inv)
            f = f + max(f, MIN_IMPULSE) if f > 0 else 0.0

            jx = -nx * f
            jy = -ny * f

            # Push apart by half the overlap each
            sep_mag = ((p1.radius + p2.radius) - dist) / 2.0
            sx = nx * sep_mag
            sy = ny * sep_mag

            adjustments[p1.id][0] += jx * m1_inv
            adjustments[p1.id][1] += jy * m1_inv
            adjustments[p1.id][2] -= sx
            adjustments[p1.id][3] -= sy

            adjustments[p2.id][0] -= jx * m2_inv
            adjustments[p2.id][1] -= jy * m2_inv
            adjustments[p2.id][2] += sx
            adjustments[p2.id][3] += sy

        for p in pods:
            adj = adjustments[p.id]
            p.vx += adj[0]
            p.vy += adj[1]
            p.x += adj[2]
            p.y += adj[3]

def step(pods, checkpoints):
    # 1. Rotate
    # 2. Thrust
    # 3. Move
    for p in pods:
        p.rotate()
        p.apply_thrust()
        p.move(checkpoints)

    # 4. Resolve Collisions
    solve_collisions(pods)

    # 5. Friction & Truncate
    # 6. Round
    for p in pods:
        p.end_frame()
