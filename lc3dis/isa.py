from __future__ import annotations

from enum import Enum


class Opcode(Enum):
    BR = 0x0
    ADD = 0x1
    LD = 0x2
    ST = 0x3
    JSR = 0x4
    AND = 0x5
    LDR = 0x6
    STR = 0x7
    RTI = 0x8
    NOT = 0x9
    LDI = 0xA
    STI = 0xB
    RET = 0xC
    RESERVED = 0xD
    LEA = 0xE
    TRAP = 0xF

