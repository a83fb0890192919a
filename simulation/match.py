import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config import Settings
from pilot.course import Course
from pilot.decision import initial_state, step as pilot_step
from simulation.cpu_physics import Checkpoint, Pod, step as cpu_step
from simulation.tracks import start_angle, start_positions

logger = logging.getLogger(__name__)

TEAM_PILOT = 0
TEAM_CHASER = 1

@dataclass
class MatchResult:
    winner: Optional[int] # Team id, None on turn cap
    turns: int
    reason: str
    laps: List[int] = field(default_factory=list)
    checkpoints_passed: List[int] = field(default_factory=list)
    boosts_used: List[int] = field(default_factory=list)
    shields_raised: List[int] = field(default_factory=list)

def chaser_command(pod: Pod, checkpoints, thrust: int):
    """Opponent bot: full throttle at its next checkpoint."""
    cp = checkpoints[pod.next_checkpoint_id]
    return cp.x, cp.y, thrust

def _team_timed_out(pods, team_id) -> bool:
    return all(p.timeout <= 0 for p in pods if p.team_id == team_id)

def run_match(checkpoints, settings: Settings, laps: int = None) -> MatchResult:
    """
    Play the pilot (pods 0 and 1) against the chaser bot (pods 2 and 3) on
    the local referee. The pilot sees exactly the integer feed the real
    referee would send.
    """
    laps = settings.match.laps if laps is None else laps
    course = Course.build(laps, checkpoints)
    cps = [Checkpoint(x, y, i) for i, (x, y) in enumerate(course.checkpoints)]
    total = laps * len(cps)

    angle = start_angle(course.checkpoints)
    spawn = start_positions(course.checkpoints, settings.match.spawn_offsets)
    # Pilot takes the inner slots, chaser the outer ones
    pods = [Pod(i, TEAM_PILOT if i < 2 else TEAM_CHASER, int(x), int(y), angle)
            for i, (x, y) in enumerate(spawn)]

    state = initial_state(course)
    winner, reason, turn = None, "turn cap", 0

    for turn in range(1, settings.match.max_turns + 1):
        state, decisions = pilot_step(state, [p.telemetry() for p in pods], settings)
        for pod, decision in zip(pods[:2], decisions):
            pod.set_command(decision.x, decision.y, decision.command)
        for pod in pods[2:]:
            pod.set_command(*chaser_command(pod, cps, settings.match.bot_thrust))

        cpu_step(pods, cps)

        finished = [p.team_id for p in pods if p.checkpoints_passed >= total]
        if finished:
            # Same-turn finishes go to the pod listed first
            winner, reason = finished[0], "finished"
            break
        if _team_timed_out(pods, TEAM_PILOT):
            winner, reason = TEAM_CHASER, "timeout"
            break
        if _team_timed_out(pods, TEAM_CHASER):
            winner, reason = TEAM_PILOT, "timeout"
            break

    logger.info(f"Match over after {turn} turns: winner={winner} ({reason})")
    return MatchResult(
        winner=winner,
        turns=turn,
        reason=reason,
        laps=[p.laps for p in pods],
        checkpoints_passed=[p.checkpoints_passed for p in pods],
        boosts_used=[p.boosts_used for p in pods],
        shields_raised=[p.shields_raised for p in pods],
    )
