"""
Interactive Adder

Prompts for two integers, reads them, and prints their sum.

Run with:
    adder
    python -m adder
"""

import sys
import uuid
from typing import Optional, TextIO

from .calculator import CalculationRequest, add
from .config import Config, load_config
from .errors import AdderError
from .logging_config import get_logger, set_run_id, setup_logging
from .tokens import TokenReader

logger = get_logger("cli")

PROMPT_A = "Please enter the first integer (a): "
PROMPT_B = "Please enter the second integer (b): "


def _prompt(stdout: TextIO, text: str) -> None:
    stdout.write(text)
    stdout.flush()


def run(
    stdin: TextIO,
    stdout: TextIO,
    config: Optional[Config] = None,
) -> int:
    """
    Run one prompt/read/compute/print cycle.

    Args:
        stdin: Stream the operands are read from
        stdout: Stream prompts and the result line are written to
        config: Settings (defaults to Config())

    Returns:
        Exit status 0; failures raise instead

    Raises:
        AdderError: on malformed input, missing input, or overflow.
            Nothing beyond the prompts already written reaches stdout.
    """
    config = config or Config()

    with TokenReader(stdin) as reader:
        _prompt(stdout, PROMPT_A)
        a = reader.next_int()

        _prompt(stdout, PROMPT_B)
        b = reader.next_int()

    result = add(CalculationRequest(a=a, b=b), policy=config.overflow_policy)
    stdout.write(result.format_line() + "\n")
    stdout.flush()

    logger.info(f"Computed {result.a} + {result.b} = {result.result}")
    return 0


def main() -> int:
    """Process entry point. Returns the exit status."""
    try:
        config = load_config()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(
            level=config.log_level,
            log_file=config.log_file,
            json_format=config.log_json,
        )
    except OSError as e:
        print(f"error: cannot open log file: {e}", file=sys.stderr)
        return 1
    set_run_id(uuid.uuid4().hex[:8])

    try:
        return run(sys.stdin, sys.stdout, config)
    except AdderError as e:
        # Below the default level, so stderr carries only the diagnostic line
        logger.info(f"Run failed: {e}", extra={"error_type": type(e).__name__})
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
