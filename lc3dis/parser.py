from __future__ import annotations

from lc3dis.config import InputRadix
from lc3dis.diagnostics import DiagnosticCollector, SourceSpan
from lc3dis.word import WORD_MAX

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
BINARY_DIGITS = frozenset("01")

_PREFIXES: dict[InputRadix, tuple[str, ...]] = {
    InputRadix.HEX: ("0x", "x"),
    InputRadix.BINARY: ("0b", "b"),
}
_DIGITS: dict[InputRadix, frozenset[str]] = {
    InputRadix.HEX: HEX_DIGITS,
    InputRadix.BINARY: BINARY_DIGITS,
}


def strip_prefix(text: str, radix: InputRadix) -> str:
    lowered = text.lower()
    for prefix in _PREFIXES[radix]:
        if lowered.startswith(prefix):
            return text[len(prefix):]
    return text


def is_valid_number(text: str, radix: InputRadix) -> bool:
    digits = strip_prefix(text, radix)
    return bool(digits) and all(c in _DIGITS[radix] for c in digits)


def parse_word(
    text: str,
    radix: InputRadix,
    diagnostics: DiagnosticCollector,
    *,
    line: int = 1,
) -> int | None:
    """Parse one input line into a 16-bit word.

    ``text`` is expected to be stripped and non-empty. Returns ``None`` after
    recording an error diagnostic when the text is not a number in ``radix``
    or does not fit in a word.
    """
    span = SourceSpan.for_line(line, text)

    if not is_valid_number(text, radix):
        diagnostics.add_error("P001", f"invalid {radix.label} word '{text}'", span)
        return None

    value = int(strip_prefix(text, radix), radix.value)
    if value > WORD_MAX:
        diagnostics.add_error(
            "P002",
            f"value '{text}' does not fit in 16 bits (max xFFFF)",
            span,
        )
        return None

    return value
