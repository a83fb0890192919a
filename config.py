
# Game Constants
WIDTH = 16000
HEIGHT = 9000
POD_RADIUS = 400.0
CHECKPOINT_RADIUS = 600.0
FRICTION = 0.85
MIN_IMPULSE = 120.0
SHIELD_MASS = 10.0
SHIELD_COOLDOWN = 3 # Turns without thrust after a SHIELD
BOOST_THRUST = 650.0
MAX_THRUST = 100
MAX_TURN_DEGREES = 18.0
TIMEOUT_STEPS = 100 # NEVER CHANGE THIS VALUE, THIS IS A GAME CONSTRAINT

# Track Constants
MAX_LAPS = 3
MAX_CHECKPOINTS = 8
MIN_CHECKPOINTS = 3
MIN_CHECKPOINT_SPACING = 2500.0
TRACK_BORDER = 1800.0

# Pilot Constants
MAX_BOOST_ANGLE = 15.0
MINIMUM_DRIFT_SPEED = 100.0
DRIFT_FACTOR = 4.0
DISTANCE_FACTOR = 2.0 # Braking starts at DISTANCE_FACTOR * CHECKPOINT_RADIUS
MAX_THRUST_ANGLE = 90.0

# Collision Constants
COLLISION_RADIUS = 447.0
COLLISION_LOOKAHEAD = 2 # Ticks projected ahead
COLLISION_ANGLE_THRESHOLD = 75.0
COLLISION_SPEED_THRESHOLD = 80.0
COLLISION_DECREMENT_THRESHOLD = 10.0

# Shield Policies
SHIELD_POLICY_OFF = "off"
SHIELD_POLICY_ANGLE_SPEED = "angle_speed"
SHIELD_POLICY_BENEFIT = "benefit"
SHIELD_POLICY_COMBINED = "combined"
SHIELD_POLICIES = (
    SHIELD_POLICY_OFF,
    SHIELD_POLICY_ANGLE_SPEED,
    SHIELD_POLICY_BENEFIT,
    SHIELD_POLICY_COMBINED,
)

# Time Budget (ms)
FIRST_TICK_BUDGET_MS = 1000.0
TICK_BUDGET_MS = 75.0

from dataclasses import dataclass, field
from typing import List

@dataclass
class PilotConfig:
    max_boost_angle: float = MAX_BOOST_ANGLE
    minimum_drift_speed: float = MINIMUM_DRIFT_SPEED
    drift_factor: float = DRIFT_FACTOR
    distance_factor: float = DISTANCE_FACTOR
    checkpoint_radius: float = CHECKPOINT_RADIUS
    max_thrust_angle: float = MAX_THRUST_ANGLE

    @property
    def braking_distance(self) -> float:
        return self.distance_factor * self.checkpoint_radius

@dataclass
class ShieldConfig:
    policy: str = SHIELD_POLICY_COMBINED
    collision_radius: float = COLLISION_RADIUS
    lookahead: int = COLLISION_LOOKAHEAD
    friction: float = FRICTION
    angle_threshold: float = COLLISION_ANGLE_THRESHOLD
    speed_threshold: float = COLLISION_SPEED_THRESHOLD
    decrement_threshold: float = COLLISION_DECREMENT_THRESHOLD

    def __post_init__(self):
        if self.policy not in SHIELD_POLICIES:
            raise ValueError(f"Unknown shield policy: {self.policy!r}")
        if self.lookahead < 1:
            raise ValueError("lookahead must be at least 1 tick")

@dataclass
class BudgetConfig:
    first_tick_ms: float = FIRST_TICK_BUDGET_MS
    tick_ms: float = TICK_BUDGET_MS

@dataclass
class MatchConfig:
    laps: int = MAX_LAPS
    max_turns: int = 600
    bot_thrust: int = 100
    # Spawn offsets along the start line, one per pod
    spawn_offsets: List[int] = field(default_factory=lambda: [500, -500, 1500, -1500])

@dataclass
class Settings:
    pilot: PilotConfig = None
    shield: ShieldConfig = None
    budget: BudgetConfig = None
    match: MatchConfig = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.pilot = self.pilot or PilotConfig()
        self.shield = self.shield or ShieldConfig()
        self.budget = self.budget or BudgetConfig()
        self.match = self.match or MatchConfig()

def get_settings(**overrides) -> Settings:
    """Fresh settings, optionally overriding top-level groups (pilot=..., shield=...)."""
    return Settings(**overrides)
