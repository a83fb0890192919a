"""
Line protocol spoken with the referee.

Setup block: laps, checkpoint count, then one "x y" line per checkpoint.
Each turn: four "x y vx vy angle nextCheckpointId" lines (own pods first,
then opponents). Reply: two "x y command" lines, pod 1 first.
"""
import logging

from config import Settings
from pilot.course import Course
from pilot.decision import Decision, initial_state, step
from pilot.errors import ProtocolError
from pilot.pod import Telemetry

logger = logging.getLogger(__name__)

TELEMETRY_FIELDS = 6

def _read_line(readline, what: str) -> str:
    line = readline()
    if not line:
        raise ProtocolError(f"Unexpected end of input while reading {what}")
    return line

def _ints(line: str, count: int, what: str):
    parts = line.split()
    if len(parts) != count:
        raise ProtocolError(f"Expected {count} integers for {what}, got {line.strip()!r}")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ProtocolError(f"Non-integer value in {what}: {line.strip()!r}") from None

def read_course(readline) -> Course:
    laps, = _ints(_read_line(readline, "laps"), 1, "laps")
    count, = _ints(_read_line(readline, "checkpoint count"), 1, "checkpoint count")
    checkpoints = [
        _ints(_read_line(readline, f"checkpoint {i}"), 2, f"checkpoint {i}")
        for i in range(count)
    ]
    course = Course.build(laps, checkpoints)
    logger.info(f"Course: {laps} laps, {count} checkpoints, boost towards checkpoint "
                f"{course.optimal_boost_checkpoint_id}")
    return course

def parse_telemetry(line: str) -> Telemetry:
    return Telemetry(*_ints(line, TELEMETRY_FIELDS, "pod telemetry"))

def read_telemetry(readline, count: int = 4):
    """
    Read one turn of telemetry. Returns None when the input ends cleanly
    before the turn starts.
    """
    first = readline()
    if not first:
        return None
    telemetry = [parse_telemetry(first)]
    for i in range(1, count):
        telemetry.append(parse_telemetry(_read_line(readline, f"pod {i} telemetry")))
    return telemetry

def format_decision(decision: Decision) -> str:
    return f"{decision.x} {decision.y} {decision.command}"

def run(stdin, stdout, settings: Settings) -> int:
    """Play until the referee closes the input. Returns the number of turns played."""
    state = initial_state(read_course(stdin.readline))
    while True:
        telemetry = read_telemetry(stdin.readline)
        if telemetry is None:
            logger.info(f"Input closed after {state.turn} turns")
            return state.turn
        state, decisions = step(state, telemetry, settings)
        for decision in decisions:
            stdout.write(format_decision(decision) + "\n")
        stdout.flush()
