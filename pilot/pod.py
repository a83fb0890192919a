import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pilot.course import Course
from pilot.errors import ProtocolError, ResourceError
from pilot.geometry import bearing_to, distance

if TYPE_CHECKING:
    from pilot.thrust import Command

class Owner(Enum):
    OWNED = "owned"
    OPPONENT = "opponent"

class Resource(Enum):
    AVAILABLE = "available"
    CONSUMED = "consumed"

@dataclass(frozen=True)
class Telemetry:
    """One pod line of the referee feed: x y vx vy angle nextCheckpointId."""
    x: int
    y: int
    vx: int
    vy: int
    angle: int
    next_checkpoint_id: int

@dataclass
class Pod:
    id: int = 0
    owner: Owner = Owner.OWNED

    # Kinematics (telemetry)
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    speed: float = 0.0
    angle: float = 0.0 # Degrees

    # Navigation
    next_checkpoint_id: int = 0
    checkpoint_x: float = 0.0
    checkpoint_y: float = 0.0
    checkpoint_distance: float = 0.0
    checkpoint_bearing: float = 0.0
    laps: int = 0

    # One-shot resources
    boost: Resource = Resource.AVAILABLE
    shield: Resource = Resource.AVAILABLE
    shield_active: bool = False

    # Per-tick scratch
    prev_vx: float = 0.0
    prev_vy: float = 0.0
    aim_checkpoint_id: int = 0
    target_x: float = 0.0
    target_y: float = 0.0
    command: Optional["Command"] = None

    @property
    def position(self):
        return (self.x, self.y)

    @property
    def velocity(self):
        return (self.vx, self.vy)

    @property
    def checkpoint(self):
        return (self.checkpoint_x, self.checkpoint_y)

    @property
    def boost_consumed(self) -> bool:
        return self.boost is Resource.CONSUMED

    @property
    def shield_used(self) -> bool:
        return self.shield is Resource.CONSUMED

    def consume_boost(self):
        if self.boost is Resource.CONSUMED:
            raise ResourceError(f"Pod {self.id} already used its boost")
        self.boost = Resource.CONSUMED

    def raise_shield(self) -> bool:
        """
        Activate the shield for this tick. Returns True only the first time in
        the match, when the ledger entry flips to CONSUMED.
        """
        self.shield_active = True
        if self.shield is Resource.CONSUMED:
            return False
        self.shield = Resource.CONSUMED
        return True

def update_pod(pod: Pod, telemetry: Telemetry, course: Course, pod_id: int = None,
               owner: Owner = None) -> Pod:
    """
    Fold one tick of telemetry into a new Pod record.

    Position and velocity are taken as reported; nothing is integrated
    locally. Resources and the lap counter carry over, per-tick scratch is
    reset.
    """
    cp_id = telemetry.next_checkpoint_id
    if not 0 <= cp_id < course.checkpoint_count:
        raise ProtocolError(f"Checkpoint id {cp_id} out of range for {course.checkpoint_count} checkpoints")

    laps = pod.laps
    if cp_id == 0 and pod.next_checkpoint_id == course.checkpoint_count - 1:
        laps += 1

    position = (telemetry.x, telemetry.y)
    checkpoint = course.checkpoints[cp_id]

    return replace(
        pod,
        id=pod.id if pod_id is None else pod_id,
        owner=pod.owner if owner is None else owner,
        x=telemetry.x,
        y=telemetry.y,
        vx=telemetry.vx,
        vy=telemetry.vy,
        speed=math.sqrt(telemetry.vx**2 + telemetry.vy**2),
        angle=telemetry.angle,
        next_checkpoint_id=cp_id,
        checkpoint_x=checkpoint[0],
        checkpoint_y=checkpoint[1],
        checkpoint_distance=distance(position, checkpoint),
        checkpoint_bearing=bearing_to(position, checkpoint, telemetry.angle),
        laps=laps,
        shield_active=False,
        prev_vx=pod.vx,
        prev_vy=pod.vy,
        aim_checkpoint_id=cp_id,
        target_x=checkpoint[0],
        target_y=checkpoint[1],
        command=None,
    )
