from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

from lc3dis.constants import DEFAULT_ORIGIN


class InputRadix(Enum):
    HEX = 16
    BINARY = 2

    @property
    def label(self) -> str:
        return "hexadecimal" if self is InputRadix.HEX else "binary"


class OutputMode(Enum):
    FULL = "full"
    ASSEMBLY = "assembly"


@dataclass(frozen=True, slots=True)
class DisassemblerConfig:
    radix: InputRadix = InputRadix.HEX
    output: OutputMode = OutputMode.FULL
    origin: int = DEFAULT_ORIGIN

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> DisassemblerConfig:
        return cls(
            radix=args.radix,
            output=OutputMode.ASSEMBLY if args.assembly_only else OutputMode.FULL,
            origin=args.origin,
        )
