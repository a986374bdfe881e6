"""Interactive ELIZA session: python -m eliza."""

import argparse
from datetime import datetime, timezone
import glob
import logging
from logging.handlers import RotatingFileHandler
import os
import random
import sys
from typing import List, TextIO

from eliza.eliza import Eliza
from eliza.eliza_error import ElizaError
from eliza.eliza_rules import ElizaRuleTable
from eliza.eliza_settings import ElizaSettings


def setup_logging(log_dir: str) -> None:
    """Configure application logging with timestamped files and rotation."""
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,  # 1MB
        backupCount=49,  # Keep 50 files total (current + 49 backups)
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Ignore errors removing old logs


def run_session(eliza: Eliza, settings: ElizaSettings, stdin: TextIO, stdout: TextIO) -> None:
    """
    Run the read-respond loop until the quit word or end of input.

    Args:
        eliza: Responder to use
        settings: Prompt, quit word and fallback response
        stdin: Stream to read input lines from
        stdout: Stream to write prompts and responses to
    """
    logger = logging.getLogger("ElizaSession")

    while True:
        stdout.write(settings.prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            logger.info("End of input")
            return

        text = line.strip()
        if text in (settings.quit_word, f"({settings.quit_word})"):
            logger.info("Quit requested")
            return

        if not text:
            continue

        try:
            response = eliza.respond(text)

        except ElizaError as e:
            logger.warning("Cannot read input %r: %s", text, e.message)
            stdout.write(f"{e}\n")
            continue

        if response is None:
            if settings.fallback_response is not None:
                stdout.write(f"{settings.fallback_response}\n")

            continue

        stdout.write(f"{response}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="eliza",
        description="Talk to a rule-based ELIZA responder. Type 'quit' to leave."
    )
    parser.add_argument('--rules', help='Rule file with (pattern response...) forms')
    parser.add_argument('--settings', help='JSON settings file')
    parser.add_argument('--seed', type=int, help='Seed for choosing among responses')
    parser.add_argument('--case-insensitive', action='store_true', help='Match words ignoring case')
    parser.add_argument(
        '--log-dir',
        default=os.path.expanduser("~/.eliza/logs"),
        help='Directory for log files (default: ~/.eliza/logs)'
    )
    return parser


def main(argv: List[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Command line entry point.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    setup_logging(args.log_dir)
    logger = logging.getLogger("ElizaMain")

    try:
        settings = ElizaSettings.load(args.settings) if args.settings else ElizaSettings.create_default()
        if args.case_insensitive:
            settings.case_sensitive = False

        rules_path = args.rules if args.rules else settings.rules_path
        rules = ElizaRuleTable.from_file(rules_path) if rules_path else None

    except (ElizaError, OSError) as e:
        logger.error("Startup failed: %s", e)
        print(f"eliza: {e}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    run_session(Eliza(rules, settings, rng), settings, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
