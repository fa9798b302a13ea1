from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from lc3dis.config import DisassemblerConfig, InputRadix
from lc3dis.constants import DEFAULT_ORIGIN
from lc3dis.parser import is_valid_number, strip_prefix
from lc3dis.runner import STDIN_PATH, run_program
from lc3dis.word import is_word

logger = logging.getLogger(__name__)

PROG_NAME = "lc3dis"
DESCRIPTION = """\
Convert hexadecimal or binary LC-3 machine code into more friendly, readable
assembly code. The assembly code is not necessarily syntactically valid; it is
meant for debugging."""
EPILOG = """\
The input file can be the standard input, specify it with a dash: '-'. When
this is used, an empty line stops the program. If a file is read, empty lines
are ignored.

Examples:
  lc3dis program.hex
  lc3dis -b -a program.bin
  lc3dis -o 4000 -
"""


def parse_origin(text: str) -> int:
    text = text.strip()
    if not is_valid_number(text, InputRadix.HEX):
        raise argparse.ArgumentTypeError(
            f"invalid origin '{text}', provide a hexadecimal number"
        )
    value = int(strip_prefix(text, InputRadix.HEX), 16)
    if not is_word(value):
        raise argparse.ArgumentTypeError(f"origin '{text}' does not fit in 16 bits")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    radix = parser.add_mutually_exclusive_group()
    radix.add_argument(
        "-x",
        "--hex",
        dest="radix",
        action="store_const",
        const=InputRadix.HEX,
        help="hexadecimal input mode (default); each line must be a hexadecimal number",
    )
    radix.add_argument(
        "-b",
        "--binary",
        dest="radix",
        action="store_const",
        const=InputRadix.BINARY,
        help="binary input mode; each line must be a binary number",
    )
    parser.set_defaults(radix=InputRadix.HEX)
    parser.add_argument(
        "-a",
        "--assembly-only",
        action="store_true",
        help="only output the assembly, not the address and machine code",
    )
    parser.add_argument(
        "-o",
        "--origin",
        metavar="ORIGIN",
        type=parse_origin,
        default=DEFAULT_ORIGIN,
        help=f"address of the program in LC-3 memory, in hexadecimal (default: {DEFAULT_ORIGIN:X})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to standard error",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="show this help message and exit",
    )
    parser.add_argument(
        "path",
        metavar="FILE",
        nargs="?",
        help=f"file with one word per line, or '{STDIN_PATH}' for standard input",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    if args.path is None:
        parser.print_usage(sys.stderr)
        print(f"{PROG_NAME}: error: no input file", file=sys.stderr)
        print(f"Type '{PROG_NAME} -h' for help", file=sys.stderr)
        return 2

    config = DisassemblerConfig.from_args(args)
    logger.debug("configuration: %s", config)
    return run_program(args.path, config)


if __name__ == "__main__":
    sys.exit(main())
