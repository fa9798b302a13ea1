from __future__ import annotations

from lc3dis.config import OutputMode
from lc3dis.encoding import Instruction


def format_address(address: int) -> str:
    return f"x{address:04X}"


def format_listing_row(address: int, inst: Instruction) -> str:
    return (
        f"{format_address(address)} | {inst.hex_string()} | "
        f"{inst.binary_string()} | {inst.assembly_string()}"
    )


def format_row(address: int, inst: Instruction, mode: OutputMode) -> str:
    if mode is OutputMode.ASSEMBLY:
        return inst.assembly_string()
    return format_listing_row(address, inst)
