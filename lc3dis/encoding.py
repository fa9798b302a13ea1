from __future__ import annotations

from dataclasses import dataclass, field

from lc3dis.constants import MNEMONIC_WIDTH, OPCODE_HIGH_BIT, OPCODE_LOW_BIT
from lc3dis.isa import Opcode
from lc3dis.word import WORD_BITS, get_bit, get_bits, is_word, sext


def format_register(index: int) -> str:
    return f"R{index}"


def format_signed(value: int) -> str:
    if value < 0:
        return f"-{-value}"
    return f"+{value}"


def format_pc_offset(offset: int) -> str:
    return f"[OFFSET {format_signed(offset)}]"


def _line(mnemonic: str, *operands: str) -> str:
    return f"{mnemonic:<{MNEMONIC_WIDTH}}" + " ".join(operands)


@dataclass(frozen=True, slots=True)
class Instruction:
    word: int
    opcode: Opcode = field(init=False)

    def __post_init__(self) -> None:
        if not is_word(self.word):
            raise ValueError(f"not a 16-bit word: {self.word!r}")
        op_int = get_bits(self.word, OPCODE_HIGH_BIT, OPCODE_LOW_BIT)
        object.__setattr__(self, "opcode", Opcode(op_int))

    def __str__(self) -> str:
        return self.assembly_string()

    def hex_string(self) -> str:
        return f"x{self.word:04X}"

    def binary_string(self) -> str:
        return f"{self.word:0{WORD_BITS}b}"

    def assembly_string(self) -> str:
        w = self.word
        opcode = self.opcode

        match opcode:
            case Opcode.BR:
                flags = "".join(
                    flag for flag, bit in (("n", 11), ("z", 10), ("p", 9)) if get_bit(w, bit)
                )
                return _line(f"BR{flags}", format_pc_offset(sext(get_bits(w, 8, 0), 9)))

            case Opcode.ADD | Opcode.AND:
                dest = get_bits(w, 11, 9)
                src1 = get_bits(w, 8, 6)
                if get_bit(w, 5):
                    src2 = f"#{sext(get_bits(w, 4, 0), 5)}"
                else:
                    src2 = format_register(get_bits(w, 2, 0))
                return _line(opcode.name, format_register(dest), format_register(src1), src2)

            case Opcode.LD | Opcode.LDI | Opcode.ST | Opcode.STI | Opcode.LEA:
                dest = get_bits(w, 11, 9)
                offset = sext(get_bits(w, 8, 0), 9)
                return _line(opcode.name, format_register(dest), format_pc_offset(offset))

            case Opcode.LDR | Opcode.STR:
                reg = get_bits(w, 11, 9)
                base = get_bits(w, 8, 6)
                offset = sext(get_bits(w, 5, 0), 6)
                return _line(
                    opcode.name,
                    format_register(reg),
                    format_register(base),
                    f"#{format_signed(offset)}",
                )

            case Opcode.NOT:
                dest = get_bits(w, 11, 9)
                src = get_bits(w, 8, 6)
                return _line("NOT", format_register(dest), format_register(src))

            case Opcode.JSR:
                if get_bit(w, 11):
                    return _line("JSRR", format_register(get_bits(w, 8, 6)))
                return _line("JSR", format_pc_offset(sext(get_bits(w, 10, 0), 11)))

            case Opcode.TRAP:
                return _line("TRAP", f"x{get_bits(w, 7, 0):X}")

            case Opcode.RET | Opcode.RTI:
                return opcode.name

            case _:
                return "[RESERVED]"


def decode_word(value: int) -> Instruction:
    return Instruction(value)


def decode_words(values: tuple[int, ...] | list[int]) -> tuple[Instruction, ...]:
    return tuple(decode_word(v) for v in values)
