import io
import logging
from pathlib import Path

import pytest

from lc3dis.config import DisassemblerConfig, InputRadix, OutputMode
from lc3dis.diagnostics import DiagnosticCollector
from lc3dis.isa import Opcode
from lc3dis.listing import format_listing_row, format_row
from lc3dis.encoding import decode_word
from lc3dis.runner import (
    Status,
    disassemble_lines,
    process_line,
    run_program,
    run_program_from_file,
)

ADD_ROW = "x3000 | x1001 | 0001000000000001 | ADD    R0 R0 R1"
TRAP_ROW = "x3001 | xF025 | 1111000000100101 | TRAP   x25"


def run(lines, config=None, **kwargs) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    status = disassemble_lines(
        lines, config or DisassemblerConfig(), out=out, err=err, **kwargs
    )
    return status, out.getvalue(), err.getvalue()


def test_listing_row() -> None:
    inst = decode_word(0x1001)
    assert format_listing_row(0x3000, inst) == ADD_ROW
    assert format_row(0x3000, inst, OutputMode.FULL) == ADD_ROW
    assert format_row(0x3000, inst, OutputMode.ASSEMBLY) == "ADD    R0 R0 R1"


def test_process_line_statuses() -> None:
    config = DisassemblerConfig()
    diagnostics = DiagnosticCollector()

    decoded = process_line("F025\n", 1, config, diagnostics)
    assert decoded.status is Status.CONTINUE
    assert decoded.instruction is not None
    assert decoded.instruction.opcode is Opcode.TRAP

    skipped = process_line("   \n", 2, config, diagnostics)
    assert skipped.status is Status.CONTINUE
    assert skipped.instruction is None

    stopped = process_line("\n", 3, config, diagnostics, interactive=True)
    assert stopped.status is Status.STOP_CLEAN

    failed = process_line("nope", 4, config, diagnostics)
    assert failed.status is Status.FAIL
    assert failed.diagnostic is not None
    assert failed.diagnostic.code == "P001"
    assert failed.diagnostic.span.start_line == 4


def test_file_mode_skips_blank_lines() -> None:
    status, out, err = run(["1001", "", "  ", "F025"])
    assert status == 0
    assert out.splitlines() == [ADD_ROW, TRAP_ROW]
    assert err == ""


def test_interactive_mode_stops_at_blank_line() -> None:
    status, out, _ = run(["1001\n", "\n", "F025\n"], interactive=True)
    assert status == 0
    assert out.splitlines() == [ADD_ROW]


def test_invalid_line_is_reported_and_skipped() -> None:
    status, out, err = run(["1001", "zz", "F025"], label="prog.hex")
    assert status == 0
    assert out.splitlines() == [ADD_ROW, TRAP_ROW]
    assert err == "[P001] error: invalid hexadecimal word 'zz' at prog.hex:2:1-2\n"


def test_assembly_only_binary_input() -> None:
    config = DisassemblerConfig(radix=InputRadix.BINARY, output=OutputMode.ASSEMBLY)
    _, out, _ = run(["0001000000000001", "1100000111000000"], config)
    assert out.splitlines() == ["ADD    R0 R0 R1", "RET"]


def test_counter_starts_at_origin_and_wraps() -> None:
    config = DisassemblerConfig(origin=0xFFFF)
    _, out, _ = run(["1001", "F025"], config)
    rows = out.splitlines()
    assert rows[0].startswith("xFFFF | x1001")
    assert rows[1].startswith("x0000 | xF025")


def test_run_program_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "prog.hex"
    source.write_text("1001\n\nF025\nxyz\n", encoding="utf-8")

    assert run_program_from_file(source, DisassemblerConfig()) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [ADD_ROW, TRAP_ROW]
    assert f"at {source}:4:1-3" in captured.err


def test_run_program_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_program_from_file(tmp_path / "missing.hex", DisassemblerConfig()) == 1
    captured = capsys.readouterr()
    assert "not found" in captured.err
    assert captured.out == ""


def test_run_program_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert run_program_from_file(tmp_path, DisassemblerConfig()) == 1
    assert "is not a file" in capsys.readouterr().err


def test_run_program_undecodable_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "prog.hex"
    source.write_bytes(b"1001\n\xff\xfe\n")
    assert run_program_from_file(source, DisassemblerConfig()) == 1
    captured = capsys.readouterr()
    assert "failed to read" in captured.err
    assert captured.out == ""


def test_run_program_from_stdin(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1001\n\nF025\n"))
    assert run_program("-", DisassemblerConfig()) == 0
    assert capsys.readouterr().out.splitlines() == [ADD_ROW]


def test_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lc3dis")
    run(["1001", "zz"])
    assert "decoded 1 word(s), rejected 1 line(s)" in caplog.text


def test_interactive_whitespace_line_is_skipped() -> None:
    config = DisassemblerConfig()
    diagnostics = DiagnosticCollector()

    assert process_line("   \n", 1, config, diagnostics, interactive=True).status is Status.CONTINUE
    assert process_line("\r\n", 2, config, diagnostics, interactive=True).status is Status.STOP_CLEAN

    status, out, _ = run(["1001\n", " \t\n", "F025\n", "\n", "1001\n"], interactive=True)
    assert status == 0
    assert out.splitlines() == [ADD_ROW, TRAP_ROW]


def test_run_program_from_stdin_undecodable(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    stdin = io.TextIOWrapper(io.BytesIO(b"1001\n\xff\xfe\nF025\n"), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", stdin)

    assert run_program("-", DisassemblerConfig()) == 1
    assert "error: failed to read '<stdin>'" in capsys.readouterr().err


def test_file_line_count_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="lc3dis")
    source = tmp_path / "prog.hex"
    source.write_text("1001\nF025\n", encoding="utf-8")

    assert run_program_from_file(source, DisassemblerConfig()) == 0
    assert f"read 2 line(s) from {source}" in caplog.text
