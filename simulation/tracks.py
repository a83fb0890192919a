import math
import numpy as np
from config import HEIGHT, MAX_CHECKPOINTS, MIN_CHECKPOINT_SPACING, MIN_CHECKPOINTS, TRACK_BORDER, WIDTH

# League maps, checkpoint 0 first
PREDEFINED_MAPS = [
    [[12460, 1350], [10540, 5980], [3580, 5180], [13580, 7600]],
    [[3600, 5280], [13840, 5080], [10680, 2280], [8700, 7460], [7200, 2160]],
    [[4560, 2180], [7350, 4940], [3320, 7230], [14580, 7700], [10560, 5060], [13100, 2320]],
    [[5010, 5260], [11480, 6080], [9100, 1840]],
    [[14660, 1410], [3450, 7220], [9420, 7240], [5970, 4240]],
    [[3640, 4420], [8000, 7900], [13300, 5540], [9560, 1400]],
    [[4100, 7420], [13500, 2340], [12940, 7220], [5640, 2580]],
    [[14520, 7780], [6320, 4290], [7800, 860], [7660, 5970], [3140, 7540], [9520, 4380]],
    [[10040, 5970], [13920, 1940], [8020, 3260], [2670, 7020]],
    [[7500, 6940], [6000, 5360], [11300, 2820]],
    [[4060, 4660], [13040, 1900], [6560, 7840], [7480, 1360], [12700, 7100]],
    [[3020, 5190], [6280, 7760], [14100, 7760], [13880, 1220], [10240, 4920], [6100, 2200]],
    [[10323, 3366], [11203, 5425], [7259, 6656], [5425, 2838]],
]

PREDEFINED_MAP_RATIO = 0.2

class TrackGenerator:
    """
    Handles generation of race tracks (checkpoints).
    """
    @staticmethod
    def generate_max_entropy(rng, num_cps, width=WIDTH, height=HEIGHT,
                             min_dist=MIN_CHECKPOINT_SPACING, border=TRACK_BORDER):
        """
        Uniform checkpoints with a guaranteed minimum spacing.
        Uses Rejection Sampling over whole layouts first, then falls back to
        placing checkpoints one at a time.
        """
        MAX_ATTEMPTS = 100

        for _ in range(MAX_ATTEMPTS):
            cands = np.column_stack([
                rng.uniform(border, width - border, num_cps),
                rng.uniform(border, height - border, num_cps),
            ])
            d = np.linalg.norm(cands[:, None, :] - cands[None, :, :], axis=2)
            np.fill_diagonal(d, np.inf)
            if d.min() >= min_dist:
                return np.rint(cands).astype(np.int64)

        # Sequential fallback: 50 builds, 50 tries per point
        for _ in range(50):
            placed = []
            for _ in range(num_cps):
                for _ in range(50):
                    cand = np.array([rng.uniform(border, width - border),
                                     rng.uniform(border, height - border)])
                    if all(np.linalg.norm(cand - p) >= min_dist for p in placed):
                        placed.append(cand)
                        break
                else:
                    break
            if len(placed) == num_cps:
                return np.rint(np.array(placed)).astype(np.int64)

        raise RuntimeError(f"Could not place {num_cps} checkpoints {min_dist} apart")

def random_track(rng):
    """A predefined map some of the time, otherwise a generated one."""
    if rng.random() < PREDEFINED_MAP_RATIO:
        return np.array(PREDEFINED_MAPS[rng.integers(len(PREDEFINED_MAPS))], dtype=np.int64)
    num_cps = int(rng.integers(MIN_CHECKPOINTS, MAX_CHECKPOINTS + 1))
    return TrackGenerator.generate_max_entropy(rng, num_cps)

def start_positions(checkpoints, offsets):
    """
    Pods line up on checkpoint 0, spread along the line perpendicular to the
    first leg of the course.
    """
    cps = np.asarray(checkpoints, dtype=np.float64)
    leg = cps[1] - cps[0]
    length = np.linalg.norm(leg)
    if length == 0:
        normal = np.array([0.0, 1.0])
    else:
        normal = np.array([-leg[1], leg[0]]) / length
    positions = cps[0] + np.outer(offsets, normal)
    return np.rint(positions).astype(np.int64)

def start_angle(checkpoints) -> float:
    """Heading (degrees, [0, 360)) from checkpoint 0 towards checkpoint 1."""
    (x0, y0), (x1, y1) = checkpoints[0], checkpoints[1]
    return math.degrees(math.atan2(y1 - y0, x1 - x0)) % 360.0
