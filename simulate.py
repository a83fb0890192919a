import argparse
import numpy as np

from config import SHIELD_POLICIES, ShieldConfig, get_settings
from pilot.log import setup_logging
from simulation.match import TEAM_PILOT, run_match
from simulation.tracks import PREDEFINED_MAPS, random_track

def main(argv=None):
    parser = argparse.ArgumentParser(description="Run local matches: pilot vs chaser bot")
    parser.add_argument("--matches", type=int, default=10)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--laps", type=int, default=None)
    parser.add_argument("--map", type=int, default=None, help="Index into the predefined maps (random tracks otherwise)")
    parser.add_argument("--shield-policy", type=str, default=None, choices=SHIELD_POLICIES)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    settings = get_settings()
    if args.shield_policy:
        settings.shield = ShieldConfig(policy=args.shield_policy)

    rng = np.random.default_rng(args.seed)
    wins, turns = 0, []
    for m in range(args.matches):
        if args.map is not None:
            checkpoints = PREDEFINED_MAPS[args.map]
        else:
            checkpoints = random_track(rng).tolist()
        result = run_match(checkpoints, settings, laps=args.laps)
        wins += result.winner == TEAM_PILOT
        turns.append(result.turns)
        print(f"Match {m}: {len(checkpoints)} cps, winner={result.winner} ({result.reason}) "
              f"turns={result.turns} boosts={result.boosts_used[:2]} shields={result.shields_raised[:2]}")

    print(f"Pilot won {wins}/{args.matches}, mean turns {np.mean(turns):.1f}")
    return 0

if __name__ == "__main__":
    main()
