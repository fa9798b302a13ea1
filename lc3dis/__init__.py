from lc3dis.isa import Opcode
from lc3dis.encoding import Instruction, decode_word, decode_words
from lc3dis.config import DisassemblerConfig, InputRadix, OutputMode
from lc3dis.diagnostics import Diagnostic, DiagnosticCollector, Severity, SourceSpan
from lc3dis.parser import parse_word
from lc3dis.listing import format_listing_row, format_row
from lc3dis.runner import LineResult, Status, disassemble_lines, process_line
from lc3dis.word import (
    word,
    is_word,
    get_bits,
    get_bit,
    sext,
    WORD_MASK,
    WORD_BITS,
)

__all__ = [
    "Opcode",
    "Instruction",
    "decode_word",
    "decode_words",
    "DisassemblerConfig",
    "InputRadix",
    "OutputMode",
    "Diagnostic",
    "DiagnosticCollector",
    "Severity",
    "SourceSpan",
    "parse_word",
    "format_listing_row",
    "format_row",
    "LineResult",
    "Status",
    "disassemble_lines",
    "process_line",
    "word",
    "is_word",
    "get_bits",
    "get_bit",
    "sext",
    "WORD_MASK",
    "WORD_BITS",
]
