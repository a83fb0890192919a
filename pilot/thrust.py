from dataclasses import dataclass
from enum import Enum

from config import MAX_THRUST, PilotConfig
from pilot.course import Course

class CommandKind(Enum):
    THRUST = "thrust"
    BOOST = "BOOST"
    SHIELD = "SHIELD"

@dataclass(frozen=True)
class Command:
    """Propulsion command: a throttle in [0, 100], BOOST or SHIELD."""
    kind: CommandKind
    thrust: int = 0

    def __post_init__(self):
        if self.kind is CommandKind.THRUST and not 0 <= self.thrust <= MAX_THRUST:
            raise ValueError(f"Thrust {self.thrust} outside [0, {MAX_THRUST}]")

    @classmethod
    def numeric(cls, value: float) -> 'Command':
        return cls(CommandKind.THRUST, int(round(max(0.0, min(float(MAX_THRUST), value)))))

    @property
    def is_boost(self) -> bool:
        return self.kind is CommandKind.BOOST

    @property
    def is_shield(self) -> bool:
        return self.kind is CommandKind.SHIELD

    def __str__(self):
        if self.kind is CommandKind.THRUST:
            return str(self.thrust)
        return self.kind.value

BOOST = Command(CommandKind.BOOST)
SHIELD = Command(CommandKind.SHIELD)

def can_boost(pod, course: Course, config: PilotConfig) -> bool:
    return (abs(pod.checkpoint_bearing) < config.max_boost_angle
            and pod.next_checkpoint_id == course.optimal_boost_checkpoint_id
            and not pod.boost_consumed)

def plan_thrust(pod, course: Course, config: PilotConfig) -> Command:
    """
    Throttle for this tick, or BOOST on the longest straight.

    Leaves the boost ledger alone; it is spent only when BOOST is the
    command actually sent.
    """
    if can_boost(pod, course, config):
        return BOOST

    thrust = float(MAX_THRUST)

    # 1. Ease off as the checkpoint swings away from the nose, zero past 90 deg
    bearing = abs(pod.checkpoint_bearing)
    thrust *= max(0.0, 1.0 - bearing / config.max_thrust_angle)

    # 2. Brake linearly inside the braking distance
    braking_distance = config.braking_distance
    if pod.checkpoint_distance < braking_distance:
        thrust *= pod.checkpoint_distance / braking_distance

    return Command.numeric(thrust)
