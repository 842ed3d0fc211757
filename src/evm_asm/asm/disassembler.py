"""EVM bytecode disassembler: bytes → AssemblyModule."""

from __future__ import annotations

import logging

from evm_asm.asm.decoder import Instruction, decode
from evm_asm.asm.forks import LATEST, Hardfork
from evm_asm.asm.module import AssemblyModule

logger = logging.getLogger(__name__)


def parse_hex(bytecode_hex: str) -> bytes:
    """Convert a hex string (optionally 0x-prefixed) into raw bytecode.

    Raises ValueError for malformed hex.
    """
    hex_str = bytecode_hex.strip()
    if hex_str.startswith(("0x", "0X")):
        hex_str = hex_str[2:]
    return bytes.fromhex(hex_str)


def disassemble(code: bytes | bytearray | memoryview, fork: Hardfork = LATEST) -> AssemblyModule:
    """Disassemble raw EVM bytecode in a single sequential pass.

    Each instruction's start offset depends on the sizes of all instructions
    before it, so decoding always proceeds from offset 0. Unknown opcodes
    and truncated PUSH payloads are decoded, never rejected.
    """
    raw = bytes(code)
    instructions: list[Instruction] = []
    jump_destinations: set[int] = set()
    i = 0

    while i < len(raw):
        instr = decode(raw, i, fork)
        if instr.descriptor.is_jumpdest:
            jump_destinations.add(i)
        instructions.append(instr)
        i += instr.size

    if instructions and instructions[-1].is_truncated:
        last = instructions[-1]
        logger.debug(
            "%s at offset %d truncated: %d of %d immediate bytes",
            last.mnemonic,
            last.offset,
            len(last.immediate),
            last.descriptor.immediate_size,
        )

    logger.debug(
        "Disassembled %d bytes into %d instructions (%d jumpdests, %s)",
        len(raw),
        len(instructions),
        len(jump_destinations),
        fork.value,
    )
    return AssemblyModule(instructions, jump_destinations)


def disassemble_hex(bytecode_hex: str, fork: Hardfork = LATEST) -> AssemblyModule:
    """Disassemble a hex string. Handles the 0x prefix and empty input."""
    return disassemble(parse_hex(bytecode_hex), fork)
