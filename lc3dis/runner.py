from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, Iterable

from lc3dis.config import DisassemblerConfig
from lc3dis.diagnostics import Diagnostic, DiagnosticCollector
from lc3dis.encoding import Instruction, decode_word
from lc3dis.listing import format_row
from lc3dis.parser import parse_word
from lc3dis.word import word

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class Status(Enum):
    CONTINUE = "continue"
    STOP_CLEAN = "stop"
    FAIL = "fail"


@dataclass(frozen=True, slots=True)
class LineResult:
    status: Status
    instruction: Instruction | None = None
    diagnostic: Diagnostic | None = None


def process_line(
    raw: str,
    line_no: int,
    config: DisassemblerConfig,
    diagnostics: DiagnosticCollector,
    *,
    interactive: bool = False,
) -> LineResult:
    """Parse and decode one input line.

    A blank line is skipped (``CONTINUE`` without an instruction). When
    reading interactively, an empty line (nothing but the line terminator)
    ends the run with ``STOP_CLEAN`` instead. A line that does
    not parse yields ``FAIL`` carrying the diagnostic that was recorded.
    """
    if interactive and not raw.rstrip("\r\n"):
        return LineResult(Status.STOP_CLEAN)

    text = raw.strip()
    if not text:
        return LineResult(Status.CONTINUE)

    value = parse_word(text, config.radix, diagnostics, line=line_no)
    if value is None:
        return LineResult(Status.FAIL, diagnostic=diagnostics.diagnostics[-1])

    return LineResult(Status.CONTINUE, instruction=decode_word(value))


def disassemble_lines(
    lines: Iterable[str],
    config: DisassemblerConfig,
    *,
    interactive: bool = False,
    label: str | None = None,
    out: IO[str] | None = None,
    err: IO[str] | None = None,
) -> int:
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    diagnostics = DiagnosticCollector()
    address = config.origin
    decoded = 0

    for line_no, raw in enumerate(lines, start=1):
        result = process_line(raw, line_no, config, diagnostics, interactive=interactive)

        if result.status is Status.STOP_CLEAN:
            logger.debug("empty line %d on interactive input, stopping", line_no)
            break

        if result.status is Status.FAIL:
            assert result.diagnostic is not None
            print(result.diagnostic.format(label), file=err, flush=interactive)
            continue

        if result.instruction is None:
            continue

        print(format_row(address, result.instruction, config.output), file=out, flush=interactive)
        address = word(address + 1)
        decoded += 1

    logger.debug(
        "decoded %d word(s), rejected %d line(s)", decoded, diagnostics.error_count()
    )
    return 0


def run_program_from_stdin(config: DisassemblerConfig) -> int:
    logger.debug("reading words from standard input")
    try:
        return disassemble_lines(sys.stdin, config, interactive=True, label="<stdin>")
    except UnicodeDecodeError as e:
        print(f"error: failed to read '<stdin>': {e}", file=sys.stderr)
        return 1


def run_program_from_file(path: Path | str, config: DisassemblerConfig) -> int:
    path = Path(path).expanduser()

    if not path.exists():
        print(f"error: file '{path}' not found", file=sys.stderr)
        return 1

    if not path.is_file():
        print(f"error: '{path}' is not a file", file=sys.stderr)
        return 1

    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"error: failed to read '{path}': {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: failed to read '{path}': {e}", file=sys.stderr)
        return 1

    lines = source.splitlines()
    logger.debug("read %d line(s) from %s", len(lines), path)
    return disassemble_lines(lines, config, label=str(path))


def run_program(path: str, config: DisassemblerConfig) -> int:
    if path == STDIN_PATH:
        return run_program_from_stdin(config)
    return run_program_from_file(path, config)
