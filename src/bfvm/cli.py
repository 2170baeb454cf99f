from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .compiler import compile_program
from .config import DEFAULT_TAPE_SIZE, MachineConfig
from .errors import TapeBoundsError, UnmatchedBracket
from .instructions import format_listing
from .vm import evaluate

logger = logging.getLogger(__name__)


_FLAGS = {"--dump", "-v", "--verbose", "-h", "--help"}
_VALUED = {"--tape-size", "--start-offset"}


def _split_program(argv: List[str]) -> List[str]:
    # Programs may start with '-' ("-[--->+<]>-."), so only our own option
    # strings go to argparse; everything else is passed after "--".
    options: List[str] = []
    program: List[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            program.extend(args)
            break
        if arg in _FLAGS or ("=" in arg and arg.split("=", 1)[0] in _VALUED):
            options.append(arg)
        elif arg in _VALUED:
            options.append(arg)
            value = next(args, None)
            if value is not None:
                options.append(value)
        else:
            program.append(arg)
    if program:
        return options + ["--"] + program
    return options


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Compile and run a Brainfuck program given as a single argument.",
        allow_abbrev=False,
    )
    parser.add_argument("program", help="Full program source text")
    parser.add_argument("--tape-size", type=int, default=DEFAULT_TAPE_SIZE, help="Number of tape cells (default 10000)")
    parser.add_argument("--start-offset", type=int, default=None, help="Initial data pointer (default: tape midpoint)")
    parser.add_argument("--dump", action="store_true", help="Print the compiled instruction listing instead of running")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_split_program(argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = MachineConfig(tape_size=args.tape_size, start_offset=args.start_offset)
    except ValueError as e:
        parser.error(str(e))

    try:
        program = compile_program(args.program)
    except UnmatchedBracket as e:
        print(e, file=sys.stderr)
        logger.debug("%s\n%s", e.context, e.hint)
        return 1

    if args.dump:
        print(format_listing(program))
        return 0

    stdout = sys.stdout.buffer
    try:
        try:
            evaluate(program, sys.stdin.buffer, stdout, config)
        finally:
            stdout.flush()
    except TapeBoundsError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"IOError: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
