from dataclasses import dataclass

from config import PilotConfig
from pilot.course import Course
from pilot.geometry import distance
from pilot.steering import compensate_drift

@dataclass(frozen=True)
class Progress:
    checkpoint_id: int
    x: float
    y: float
    advanced: bool = False

def track_progress(pod, course: Course, config: PilotConfig) -> Progress:
    """
    Pick the checkpoint to steer for and the drift-compensated point to aim at.

    The capture radius is not trusted; instead the pod counts as having
    reached its checkpoint once it is closer to it than the aim point is,
    and steering moves on to the following checkpoint.
    """
    cp_id = pod.next_checkpoint_id
    cx, cy = course.checkpoint(cp_id)
    ax, ay = compensate_drift(pod, cx, cy, config)

    if pod.checkpoint_distance < distance((ax, ay), (cx, cy)):
        cp_id = course.next_id(cp_id)
        cx, cy = course.checkpoint(cp_id)
        ax, ay = compensate_drift(pod, cx, cy, config)
        return Progress(cp_id, ax, ay, advanced=True)

    return Progress(cp_id, ax, ay)
