from lc3dis.config import DisassemblerConfig
from lc3dis.runner import disassemble_lines

# prints "Hi" twice, then halts
SAMPLE_PROGRAM = """
5260
1262
E004
F022
127F
03FC
F025
0048
0069
0000
"""


def run_sample_program(config: DisassemblerConfig | None = None) -> int:
    config = config if config is not None else DisassemblerConfig()

    print("=== Disassembly ===")
    status = disassemble_lines(SAMPLE_PROGRAM.splitlines(), config, label="<sample>")
    print()
    print("=== Disassembly completed ===")
    return status
