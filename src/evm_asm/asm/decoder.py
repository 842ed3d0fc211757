"""Single-instruction decoding: bytes + offset → Instruction."""

from __future__ import annotations

from dataclasses import dataclass

from evm_asm.asm.forks import LATEST, Hardfork
from evm_asm.asm.opcodes import OpcodeDescriptor, describe


@dataclass(frozen=True, slots=True)
class Instruction:
    descriptor: OpcodeDescriptor
    offset: int
    immediate: bytes  # empty for non-PUSH instructions
    size: int  # 1 + len(immediate) unless built by hand

    @property
    def opcode(self) -> int:
        return self.descriptor.value

    @property
    def mnemonic(self) -> str:
        return self.descriptor.mnemonic

    @property
    def end(self) -> int:
        """Offset of the byte following this instruction."""
        return self.offset + self.size

    @property
    def is_truncated(self) -> bool:
        return len(self.immediate) < self.descriptor.immediate_size

    @property
    def immediate_value(self) -> int | None:
        """Big-endian integer value of the PUSH payload, or None for non-PUSH."""
        if not self.descriptor.is_push:
            return None
        return int.from_bytes(self.immediate, "big")

    def encode(self) -> bytes:
        return bytes((self.opcode,)) + self.immediate

    def __str__(self) -> str:
        if self.descriptor.immediate_size == 0:
            return self.mnemonic
        return f"{self.mnemonic} 0x{self.immediate.hex()}"


def decode(code: bytes, offset: int, fork: Hardfork = LATEST) -> Instruction:
    """Decode the instruction starting at ``offset``.

    PUSH payloads running past the end of ``code`` are truncated to the
    bytes available; that is not an error. Raises IndexError if ``offset``
    is outside the buffer.
    """
    if not 0 <= offset < len(code):
        raise IndexError(f"Offset {offset} outside bytecode of length {len(code)}")

    descriptor = describe(code[offset], fork)
    start = offset + 1
    immediate = bytes(code[start : start + descriptor.immediate_size])
    return Instruction(descriptor, offset, immediate, 1 + len(immediate))
