"""
Pod-pod collision prediction and response.

Prediction projects both pods forward under the referee's friction and checks
whether their discs will touch. Response covers the physics (equal-mass
elastic exchange along the line of impact) and the shield decision.
"""
import logging
import math

import numpy as np

from config import (
    SHIELD_POLICY_ANGLE_SPEED,
    SHIELD_POLICY_BENEFIT,
    SHIELD_POLICY_COMBINED,
    ShieldConfig,
)
from pilot.geometry import angle_difference, distance

logger = logging.getLogger(__name__)

def project(pod, ticks: int, friction: float):
    """Position after `ticks` steps of velocity * friction."""
    return (pod.x + pod.vx * friction * ticks,
            pod.y + pod.vy * friction * ticks)

def predict_collision(pod, other, config: ShieldConfig) -> bool:
    p1 = project(pod, config.lookahead, config.friction)
    p2 = project(other, config.lookahead, config.friction)
    return distance(p1, p2) <= 2 * config.collision_radius

def _rotation(theta: float) -> np.ndarray:
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, -s], [s, c]])

def resolve_elastic(pod, other):
    """
    Post-impact velocities of two equal-mass pods.

    Both velocities are rotated into the frame whose x axis is the line
    between the centres; the along-axis components are exchanged and the
    perpendicular ones kept. Coincident centres have no line of impact and
    leave the velocities unchanged.
    """
    v1 = np.array([pod.vx, pod.vy], dtype=np.float64)
    v2 = np.array([other.vx, other.vy], dtype=np.float64)
    dx = other.x - pod.x
    dy = other.y - pod.y
    if dx == 0 and dy == 0:
        return (float(pod.vx), float(pod.vy)), (float(other.vx), float(other.vy))

    rot = _rotation(math.atan2(dy, dx))
    # World -> impact frame is rot.T, impact -> world is rot
    u1 = rot.T @ v1
    u2 = rot.T @ v2
    u1[0], u2[0] = u2[0], u1[0]

    w1 = rot @ u1
    w2 = rot @ u2
    return (float(w1[0]), float(w1[1])), (float(w2[0]), float(w2[1]))

def _progress_gain(pod, velocity, friction: float) -> float:
    """Reduction of next-tick distance to target when flying `velocity` instead of the pod's own."""
    target = pod.checkpoint
    free = (pod.x + pod.vx * friction, pod.y + pod.vy * friction)
    hit = (pod.x + velocity[0] * friction, pod.y + velocity[1] * friction)
    return distance(free, target) - distance(hit, target)

def collision_benefit(pod, other, friction: float) -> float:
    """
    How much the impact helps `pod` towards its checkpoint compared with how
    much it helps `other`. Negative means the collision pushes us back or
    the opponent forward.
    """
    v_pod, v_other = resolve_elastic(pod, other)
    return _progress_gain(pod, v_pod, friction) - _progress_gain(other, v_other, friction)

def relative_speed(pod, other) -> float:
    return math.sqrt((pod.vx - other.vx)**2 + (pod.vy - other.vy)**2)

def is_head_on(pod, other, config: ShieldConfig) -> bool:
    return (angle_difference(pod.angle, other.angle) > config.angle_threshold
            and relative_speed(pod, other) > config.speed_threshold)

def should_shield(pod, other, config: ShieldConfig) -> bool:
    """Shield policy for a pair already predicted to collide."""
    if config.policy == SHIELD_POLICY_ANGLE_SPEED:
        return is_head_on(pod, other, config)
    if config.policy == SHIELD_POLICY_BENEFIT:
        return collision_benefit(pod, other, config.friction) < -config.decrement_threshold
    if config.policy == SHIELD_POLICY_COMBINED:
        return (is_head_on(pod, other, config)
                or collision_benefit(pod, other, config.friction) < -config.decrement_threshold)
    return False
