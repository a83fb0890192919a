from typing import Tuple

from config import PilotConfig

def compensate_drift(pod, cx: float, cy: float, config: PilotConfig) -> Tuple[float, float]:
    """
    Aim point for checkpoint (cx, cy): shifted against the current velocity
    once the pod is fast enough to drift, so momentum carries it onto the
    checkpoint instead of past it.
    """
    if pod.speed > config.minimum_drift_speed:
        return (cx - config.drift_factor * pod.vx,
                cy - config.drift_factor * pod.vy)
    return (float(cx), float(cy))

def aim_target(x: float, y: float) -> Tuple[int, int]:
    return (int(round(x)), int(round(y)))
