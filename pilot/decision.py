import logging
import time
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

from config import Settings
from pilot.collision import predict_collision, should_shield
from pilot.course import Course
from pilot.pod import Owner, Pod, Telemetry, update_pod
from pilot.progress import track_progress
from pilot.steering import aim_target
from pilot.thrust import SHIELD, Command, plan_thrust

logger = logging.getLogger(__name__)

# Pod slots in the referee feed
OWN_1, OWN_2, OPP_1, OPP_2 = 0, 1, 2, 3
OWNERS = (Owner.OWNED, Owner.OWNED, Owner.OPPONENT, Owner.OPPONENT)

@dataclass(frozen=True)
class Decision:
    pod_id: int
    x: int
    y: int
    command: Command

    def __str__(self):
        return f"{self.x} {self.y} {self.command}"

@dataclass(frozen=True)
class TickState:
    """Everything carried from one tick to the next."""
    course: Course
    pods: Tuple[Pod, Pod, Pod, Pod]
    turn: int = 0

    @property
    def owned(self) -> Tuple[Pod, Pod]:
        return self.pods[OWN_1], self.pods[OWN_2]

    @property
    def opponents(self) -> Tuple[Pod, Pod]:
        return self.pods[OPP_1], self.pods[OPP_2]

def initial_state(course: Course) -> TickState:
    pods = tuple(Pod(id=i, owner=OWNERS[i]) for i in range(4))
    return TickState(course=course, pods=pods, turn=0)

def decide(pod: Pod, teammate: Pod, opponents: Sequence[Pod], course: Course,
           settings: Settings) -> Decision:
    """
    One owned pod's command for this tick.

    Order: thrust/boost, then collision checks (a shield overrides the
    thrust), then the boost ledger if BOOST survived, then the aim point.
    """
    command = plan_thrust(pod, course, settings.pilot)

    for other in opponents:
        if not predict_collision(pod, other, settings.shield):
            continue
        logger.debug(f"Pod {pod.id} collision predicted with opponent {other.id}")
        if should_shield(pod, other, settings.shield):
            if pod.raise_shield():
                logger.info(f"Pod {pod.id} first SHIELD of the match against opponent {other.id}")
            command = SHIELD

    # Teammate contacts are observed only
    if predict_collision(pod, teammate, settings.shield):
        logger.debug(f"Pod {pod.id} collision predicted with teammate {teammate.id}")

    # A shield in the same tick keeps the boost for later
    if command.is_boost:
        pod.consume_boost()
        logger.info(f"Pod {pod.id} BOOST towards checkpoint {pod.next_checkpoint_id}")

    progress = track_progress(pod, course, settings.pilot)
    if progress.advanced:
        logger.debug(f"Pod {pod.id} steering on to checkpoint {progress.checkpoint_id}")

    x, y = aim_target(progress.x, progress.y)
    pod.aim_checkpoint_id = progress.checkpoint_id
    pod.target_x = x
    pod.target_y = y
    pod.command = command
    return Decision(pod.id, x, y, command)

def step(state: TickState, telemetry: Sequence[Telemetry],
         settings: Settings) -> Tuple[TickState, Tuple[Decision, Decision]]:
    """
    Advance one tick: fold the four telemetry lines into fresh pod records,
    then decide for both owned pods against that snapshot. Decisions come
    back in emission order (pod 1, pod 2).
    """
    if len(telemetry) != 4:
        raise ValueError(f"Expected telemetry for 4 pods, got {len(telemetry)}")

    start = time.perf_counter()
    pods = tuple(
        update_pod(state.pods[i], telemetry[i], state.course, pod_id=i, owner=OWNERS[i])
        for i in range(4)
    )
    own_1, own_2, opp_1, opp_2 = pods
    opponents = (opp_1, opp_2)

    if logger.isEnabledFor(logging.DEBUG):
        for pod in (own_1, own_2):
            logger.debug(f"Pod {pod.id} pos=({pod.x},{pod.y}) v=({pod.vx},{pod.vy}) "
                         f"cp={pod.next_checkpoint_id} dist={pod.checkpoint_distance:.0f} "
                         f"bearing={pod.checkpoint_bearing:.1f}")

    first = decide(own_1, own_2, opponents, state.course, settings)
    second = decide(own_2, own_1, opponents, state.course, settings)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    budget = settings.budget.first_tick_ms if state.turn == 0 else settings.budget.tick_ms
    if elapsed_ms > budget:
        logger.warning(f"Turn {state.turn} took {elapsed_ms:.1f} ms (budget {budget:.0f} ms)")

    return replace(state, pods=pods, turn=state.turn + 1), (first, second)
