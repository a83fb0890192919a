import argparse
import logging
import sys

from config import get_settings
from pilot.errors import ProtocolError
from pilot.log import setup_logging
from pilot.protocol import run

def main(argv=None):
    parser = argparse.ArgumentParser(description="Pod racing pilot (reads the referee feed on stdin)")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level on stderr (default from settings)")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    try:
        run(sys.stdin, sys.stdout, settings)
    except ProtocolError as e:
        logging.getLogger("bot").error(f"Protocol error: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
