"""Adventure Time — dev launcher. Starts the backend in watch mode."""

import argparse
import logging
import os
import signal
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

from adventure_time.config import get_config

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13015")

logger = logging.getLogger("adventure_time.launcher")


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Adventure Time dev launcher")
    parser.add_argument("--roll-to-next-day", action="store_true",
                        default=config["roll_to_next_day_if_past"],
                        help="Move confirmed times that already passed to tomorrow")
    parser.add_argument("--log-level", default=config["log_level"],
                        help=f"Log level for the launcher and backend (default: {config['log_level']})")
    return parser


def main():
    args = build_parser(get_config()).parse_args()

    log_level = args.log_level.upper()
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    # Build env for the subprocess so the backend picks up the same settings
    env = os.environ.copy()
    env["LOG_LEVEL"] = log_level
    if args.roll_to_next_day:
        env["ROLL_TO_NEXT_DAY_IF_PAST"] = "1"

    procs: list[subprocess.Popen] = []

    def shutdown(*_):
        logger.info("Shutting down...")
        for p in procs:
            p.terminate()
        for p in procs:
            p.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    logger.info("Starting backend on http://localhost:%s ...", BACKEND_PORT)
    procs.append(subprocess.Popen(
        ["uv", "run", "uvicorn", "backend.app:app", "--reload",
         "--host", HOST, "--port", BACKEND_PORT, "--log-level", log_level.lower()],
        cwd=ROOT, env=env,
    ))

    for p in procs:
        p.wait()


if __name__ == "__main__":
    main()
