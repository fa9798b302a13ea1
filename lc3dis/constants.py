from __future__ import annotations

DEFAULT_ORIGIN = 0x3000

OPCODE_HIGH_BIT = 15
OPCODE_LOW_BIT = 12

MNEMONIC_WIDTH = 7
