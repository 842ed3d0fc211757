"""Assembly IR: an ordered, offset-indexed instruction sequence."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from evm_asm.asm.decoder import Instruction
from evm_asm.asm.opcodes import JUMPDEST


class AssemblyError(Exception):
    """Raised when an assembly module breaks its structural invariants."""


class SizeMismatchError(AssemblyError):
    """Raised when an instruction's declared size disagrees with its payload."""

    def __init__(self, offset: int, declared: int, actual: int):
        super().__init__(
            f"Instruction at offset {offset} declares size {declared} "
            f"but encodes to {actual} bytes"
        )
        self.offset = offset
        self.declared = declared
        self.actual = actual


class LayoutError(AssemblyError):
    """Raised when instructions are not contiguous or jumpdests are wrong."""


class AssemblyModule:
    """Instructions in program order plus a jumpdest set and offset index.

    Built once by ``disassemble``; the instruction tuple is never mutated.
    External tooling can construct one directly from a list of
    instructions, in which case the jumpdest set defaults to the offsets of
    JUMPDEST instructions.
    """

    __slots__ = ("_instructions", "_index", "_jump_destinations")

    def __init__(
        self,
        instructions: Iterable[Instruction],
        jump_destinations: Iterable[int] | None = None,
    ):
        self._instructions: tuple[Instruction, ...] = tuple(instructions)
        self._index: dict[int, int] = {
            instr.offset: i for i, instr in enumerate(self._instructions)
        }
        if jump_destinations is None:
            jump_destinations = (
                instr.offset for instr in self._instructions if instr.opcode == JUMPDEST
            )
        self._jump_destinations: frozenset[int] = frozenset(jump_destinations)

    def instructions(self) -> tuple[Instruction, ...]:
        return self._instructions

    @property
    def jump_destinations(self) -> frozenset[int]:
        return self._jump_destinations

    @property
    def code_size(self) -> int:
        return sum(instr.size for instr in self._instructions)

    def instruction_at(self, offset: int) -> Instruction | None:
        """Return the instruction starting at ``offset``, or None.

        Offsets inside a PUSH payload are not instruction starts.
        """
        index = self._index.get(offset)
        if index is None:
            return None
        return self._instructions[index]

    def index_of(self, offset: int) -> int | None:
        return self._index.get(offset)

    def is_valid_jump_dest(self, offset: int) -> bool:
        return offset in self._jump_destinations

    def to_bytes(self) -> bytes:
        """Reassemble the bytecode.

        Raises SizeMismatchError if any instruction's declared size differs
        from its encoded length.
        """
        chunks: list[bytes] = []
        for instr in self._instructions:
            encoded = instr.encode()
            if len(encoded) != instr.size:
                raise SizeMismatchError(instr.offset, instr.size, len(encoded))
            chunks.append(encoded)
        return b"".join(chunks)

    def to_hex(self, prefix: bool = True) -> str:
        body = self.to_bytes().hex()
        return "0x" + body if prefix else body

    def check_invariants(self) -> None:
        """Verify sizes, contiguity from offset 0, and the jumpdest set.

        Raises SizeMismatchError or LayoutError on the first violation.
        """
        expected_offset = 0
        for instr in self._instructions:
            actual = 1 + len(instr.immediate)
            if instr.size != actual:
                raise SizeMismatchError(instr.offset, instr.size, actual)
            if instr.offset != expected_offset:
                raise LayoutError(
                    f"Instruction {instr.mnemonic} at offset {instr.offset}, "
                    f"expected offset {expected_offset}"
                )
            expected_offset = instr.end

        actual_dests = frozenset(
            instr.offset for instr in self._instructions if instr.opcode == JUMPDEST
        )
        if actual_dests != self._jump_destinations:
            missing = sorted(actual_dests - self._jump_destinations)
            extra = sorted(self._jump_destinations - actual_dests)
            raise LayoutError(
                f"Jumpdest set mismatch: missing {missing}, not instruction starts {extra}"
            )

    def listing(self) -> str:
        """Human-readable listing, one ``offset: instruction`` line each."""
        return "\n".join(
            f"{instr.offset:04x}: {instr}" for instr in self._instructions
        )

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._instructions)

    def __len__(self) -> int:
        return len(self._instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self._instructions[index]

    def __repr__(self) -> str:
        return (
            f"AssemblyModule({len(self._instructions)} instructions, "
            f"{self.code_size} bytes, {len(self._jump_destinations)} jumpdests)"
        )
