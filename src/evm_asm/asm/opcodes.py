"""Complete EVM opcode table: byte value → OpcodeDescriptor, per hardfork.

Every one of the 256 byte values resolves to a descriptor. Values the
instruction set leaves unassigned get an ``UNKNOWN_XX`` descriptor that is
still a valid one-byte instruction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from evm_asm.asm.forks import LATEST, Hardfork

JUMPDEST = 0x5B
PUSH0 = 0x5F
PUSH1 = 0x60
PUSH32 = 0x7F
DUP1 = 0x80
DUP16 = 0x8F
SWAP1 = 0x90
SWAP16 = 0x9F
LOG0 = 0xA0
LOG4 = 0xA4

_TERMINATORS = frozenset({"STOP", "RETURN", "REVERT", "INVALID", "SELFDESTRUCT"})
_CONTROL_FLOW = frozenset({"JUMP", "JUMPI", "JUMPDEST"})


class Category(str, Enum):
    ARITHMETIC = "arithmetic"
    COMPARISON = "comparison"
    BITWISE = "bitwise"
    HASHING = "hashing"
    ENVIRONMENT = "environment"
    BLOCK = "block"
    STACK = "stack"
    MEMORY = "memory"
    STORAGE = "storage"
    CONTROL_FLOW = "control_flow"
    JUMPDEST = "jumpdest"
    LOGGING = "logging"
    SYSTEM = "system"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class OpcodeDescriptor:
    value: int
    mnemonic: str
    immediate_size: int  # non-zero only for PUSH1..PUSH32
    category: Category
    description: str = ""
    introduced_in: Hardfork | None = None  # None for unassigned bytes

    @property
    def is_assigned(self) -> bool:
        return self.introduced_in is not None

    @property
    def is_push(self) -> bool:
        return self.is_assigned and PUSH0 <= self.value <= PUSH32

    @property
    def is_dup(self) -> bool:
        return self.is_assigned and DUP1 <= self.value <= DUP16

    @property
    def is_swap(self) -> bool:
        return self.is_assigned and SWAP1 <= self.value <= SWAP16

    @property
    def is_log(self) -> bool:
        return self.is_assigned and LOG0 <= self.value <= LOG4

    @property
    def is_jumpdest(self) -> bool:
        return self.value == JUMPDEST

    @property
    def is_terminator(self) -> bool:
        """True for instructions that halt execution of the current frame."""
        return self.is_assigned and self.mnemonic in _TERMINATORS

    @property
    def is_control_flow(self) -> bool:
        return self.is_assigned and self.mnemonic in _CONTROL_FLOW


_F = Hardfork
_C = Category

_ORDINALS = ["1st", "2nd", "3rd"] + [f"{n}th" for n in range(4, 18)]

# (value, mnemonic, immediate_size, category, introduced_in, description)
# Entries for the same byte must be listed in fork order; later ones win.
_DEFINITIONS: list[tuple[int, str, int, Category, Hardfork, str]] = [
    # Stop & arithmetic
    (0x00, "STOP", 0, _C.CONTROL_FLOW, _F.FRONTIER, "Halts execution."),
    (0x01, "ADD", 0, _C.ARITHMETIC, _F.FRONTIER, "Addition operation."),
    (0x02, "MUL", 0, _C.ARITHMETIC, _F.FRONTIER, "Multiplication operation."),
    (0x03, "SUB", 0, _C.ARITHMETIC, _F.FRONTIER, "Subtraction operation."),
    (0x04, "DIV", 0, _C.ARITHMETIC, _F.FRONTIER, "Integer division operation."),
    (0x05, "SDIV", 0, _C.ARITHMETIC, _F.FRONTIER, "Signed integer division operation (truncated)."),
    (0x06, "MOD", 0, _C.ARITHMETIC, _F.FRONTIER, "Modulo remainder operation."),
    (0x07, "SMOD", 0, _C.ARITHMETIC, _F.FRONTIER, "Signed modulo remainder operation."),
    (0x08, "ADDMOD", 0, _C.ARITHMETIC, _F.FRONTIER, "Modulo addition operation."),
    (0x09, "MULMOD", 0, _C.ARITHMETIC, _F.FRONTIER, "Modulo multiplication operation."),
    (0x0A, "EXP", 0, _C.ARITHMETIC, _F.FRONTIER, "Exponential operation."),
    (0x0B, "SIGNEXTEND", 0, _C.ARITHMETIC, _F.FRONTIER, "Extend length of two's complement signed integer."),
    # Comparison & bitwise
    (0x10, "LT", 0, _C.COMPARISON, _F.FRONTIER, "Less-than comparison."),
    (0x11, "GT", 0, _C.COMPARISON, _F.FRONTIER, "Greater-than comparison."),
    (0x12, "SLT", 0, _C.COMPARISON, _F.FRONTIER, "Signed less-than comparison."),
    (0x13, "SGT", 0, _C.COMPARISON, _F.FRONTIER, "Signed greater-than comparison."),
    (0x14, "EQ", 0, _C.COMPARISON, _F.FRONTIER, "Equality comparison."),
    (0x15, "ISZERO", 0, _C.COMPARISON, _F.FRONTIER, "Is-zero comparison."),
    (0x16, "AND", 0, _C.BITWISE, _F.FRONTIER, "Bitwise AND operation."),
    (0x17, "OR", 0, _C.BITWISE, _F.FRONTIER, "Bitwise OR operation."),
    (0x18, "XOR", 0, _C.BITWISE, _F.FRONTIER, "Bitwise XOR operation."),
    (0x19, "NOT", 0, _C.BITWISE, _F.FRONTIER, "Bitwise NOT operation."),
    (0x1A, "BYTE", 0, _C.BITWISE, _F.FRONTIER, "Retrieve single byte from word."),
    (0x1B, "SHL", 0, _C.BITWISE, _F.CONSTANTINOPLE, "Left shift operation."),
    (0x1C, "SHR", 0, _C.BITWISE, _F.CONSTANTINOPLE, "Logical right shift operation."),
    (0x1D, "SAR", 0, _C.BITWISE, _F.CONSTANTINOPLE, "Arithmetic (signed) right shift operation."),
    # Hashing
    (0x20, "KECCAK256", 0, _C.HASHING, _F.FRONTIER, "Compute Keccak-256 hash."),
    # Environmental
    (0x30, "ADDRESS", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get address of currently executing account."),
    (0x31, "BALANCE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get balance of the given account."),
    (0x32, "ORIGIN", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get execution origination address."),
    (0x33, "CALLER", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get caller address."),
    (0x34, "CALLVALUE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get deposited value of the current call."),
    (0x35, "CALLDATALOAD", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get input data of current environment."),
    (0x36, "CALLDATASIZE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get size of input data in current environment."),
    (0x37, "CALLDATACOPY", 0, _C.ENVIRONMENT, _F.FRONTIER, "Copy input data in current environment to memory."),
    (0x38, "CODESIZE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get size of code running in current environment."),
    (0x39, "CODECOPY", 0, _C.ENVIRONMENT, _F.FRONTIER, "Copy code running in current environment to memory."),
    (0x3A, "GASPRICE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get price of gas in current environment."),
    (0x3B, "EXTCODESIZE", 0, _C.ENVIRONMENT, _F.FRONTIER, "Get size of an account's code."),
    (0x3C, "EXTCODECOPY", 0, _C.ENVIRONMENT, _F.FRONTIER, "Copy an account's code to memory."),
    (0x3D, "RETURNDATASIZE", 0, _C.ENVIRONMENT, _F.BYZANTIUM, "Get size of output data from the previous call."),
    (0x3E, "RETURNDATACOPY", 0, _C.ENVIRONMENT, _F.BYZANTIUM, "Copy output data from the previous call to memory."),
    (0x3F, "EXTCODEHASH", 0, _C.ENVIRONMENT, _F.CONSTANTINOPLE, "Get hash of an account's code."),
    # Block
    (0x40, "BLOCKHASH", 0, _C.BLOCK, _F.FRONTIER, "Get the hash of one of the 256 most recent complete blocks."),
    (0x41, "COINBASE", 0, _C.BLOCK, _F.FRONTIER, "Get the block's beneficiary address."),
    (0x42, "TIMESTAMP", 0, _C.BLOCK, _F.FRONTIER, "Get the block's timestamp."),
    (0x43, "NUMBER", 0, _C.BLOCK, _F.FRONTIER, "Get the block's number."),
    (0x44, "DIFFICULTY", 0, _C.BLOCK, _F.FRONTIER, "Get the block's difficulty."),
    (0x44, "PREVRANDAO", 0, _C.BLOCK, _F.PARIS, "Get the previous block's RANDAO mix."),
    (0x45, "GASLIMIT", 0, _C.BLOCK, _F.FRONTIER, "Get the block's gas limit."),
    (0x46, "CHAINID", 0, _C.BLOCK, _F.ISTANBUL, "Get the chain ID."),
    (0x47, "SELFBALANCE", 0, _C.BLOCK, _F.ISTANBUL, "Get balance of currently executing account."),
    (0x48, "BASEFEE", 0, _C.BLOCK, _F.LONDON, "Get the base fee."),
    (0x49, "BLOBHASH", 0, _C.BLOCK, _F.CANCUN, "Get versioned hashes."),
    (0x4A, "BLOBBASEFEE", 0, _C.BLOCK, _F.CANCUN, "Get the blob base fee of the current block."),
    # Stack, memory, storage and flow
    (0x50, "POP", 0, _C.STACK, _F.FRONTIER, "Remove item from stack."),
    (0x51, "MLOAD", 0, _C.MEMORY, _F.FRONTIER, "Load word from memory."),
    (0x52, "MSTORE", 0, _C.MEMORY, _F.FRONTIER, "Save word to memory."),
    (0x53, "MSTORE8", 0, _C.MEMORY, _F.FRONTIER, "Save byte to memory."),
    (0x54, "SLOAD", 0, _C.STORAGE, _F.FRONTIER, "Load word from storage."),
    (0x55, "SSTORE", 0, _C.STORAGE, _F.FRONTIER, "Save word to storage."),
    (0x56, "JUMP", 0, _C.CONTROL_FLOW, _F.FRONTIER, "Alter the program counter."),
    (0x57, "JUMPI", 0, _C.CONTROL_FLOW, _F.FRONTIER, "Conditionally alter the program counter."),
    (0x58, "PC", 0, _C.CONTROL_FLOW, _F.FRONTIER, "Get the program counter before this instruction."),
    (0x59, "MSIZE", 0, _C.MEMORY, _F.FRONTIER, "Get the size of active memory in bytes."),
    (0x5A, "GAS", 0, _C.CONTROL_FLOW, _F.FRONTIER, "Get the amount of available gas."),
    (0x5B, "JUMPDEST", 0, _C.JUMPDEST, _F.FRONTIER, "Mark a valid destination for jumps."),
    (0x5C, "TLOAD", 0, _C.STORAGE, _F.CANCUN, "Load word from transient storage."),
    (0x5D, "TSTORE", 0, _C.STORAGE, _F.CANCUN, "Save word to transient storage."),
    (0x5E, "MCOPY", 0, _C.MEMORY, _F.CANCUN, "Copy memory areas."),
    (0x5F, "PUSH0", 0, _C.STACK, _F.SHANGHAI, "Place value 0 on stack."),
    # PUSH1 through PUSH32
    *[
        (
            PUSH1 + i,
            f"PUSH{i + 1}",
            i + 1,
            _C.STACK,
            _F.FRONTIER,
            f"Place {i + 1} byte item on stack.",
        )
        for i in range(32)
    ],
    # DUP1 through DUP16
    *[
        (DUP1 + i, f"DUP{i + 1}", 0, _C.STACK, _F.FRONTIER, f"Duplicate {_ORDINALS[i]} stack item.")
        for i in range(16)
    ],
    # SWAP1 through SWAP16
    *[
        (
            SWAP1 + i,
            f"SWAP{i + 1}",
            0,
            _C.STACK,
            _F.FRONTIER,
            f"Exchange 1st and {_ORDINALS[i + 1]} stack items.",
        )
        for i in range(16)
    ],
    # LOG0 through LOG4
    *[
        (LOG0 + i, f"LOG{i}", 0, _C.LOGGING, _F.FRONTIER, f"Append log record with {i} topics.")
        for i in range(5)
    ],
    # System
    (0xF0, "CREATE", 0, _C.SYSTEM, _F.FRONTIER, "Create a new account with associated code."),
    (0xF1, "CALL", 0, _C.SYSTEM, _F.FRONTIER, "Message-call into an account."),
    (0xF2, "CALLCODE", 0, _C.SYSTEM, _F.FRONTIER, "Message-call into this account with another account's code."),
    (0xF3, "RETURN", 0, _C.SYSTEM, _F.FRONTIER, "Halt execution returning output data."),
    (0xF4, "DELEGATECALL", 0, _C.SYSTEM, _F.HOMESTEAD, "Message-call keeping the current sender and value."),
    (0xF5, "CREATE2", 0, _C.SYSTEM, _F.CONSTANTINOPLE, "Create a new account at a predictable address."),
    (0xFA, "STATICCALL", 0, _C.SYSTEM, _F.BYZANTIUM, "Static message-call into an account."),
    (0xFD, "REVERT", 0, _C.SYSTEM, _F.BYZANTIUM, "Halt execution reverting state changes."),
    (0xFE, "INVALID", 0, _C.SYSTEM, _F.FRONTIER, "Designated invalid instruction."),
    (0xFF, "SELFDESTRUCT", 0, _C.SYSTEM, _F.FRONTIER, "Halt execution and register account for deletion."),
]

_UNASSIGNED: tuple[OpcodeDescriptor, ...] = tuple(
    OpcodeDescriptor(value, f"UNKNOWN_{value:02X}", 0, Category.INVALID, "Unassigned opcode.")
    for value in range(256)
)


def _build_table(fork: Hardfork) -> tuple[OpcodeDescriptor, ...]:
    assigned: dict[int, OpcodeDescriptor] = {}
    for value, mnemonic, immediate_size, category, introduced, description in _DEFINITIONS:
        if introduced.is_active_in(fork):
            assigned[value] = OpcodeDescriptor(
                value, mnemonic, immediate_size, category, description, introduced
            )
    return tuple(assigned.get(value, _UNASSIGNED[value]) for value in range(256))


_TABLES: dict[Hardfork, tuple[OpcodeDescriptor, ...]] = {
    fork: _build_table(fork) for fork in Hardfork
}

_BY_MNEMONIC: dict[Hardfork, dict[str, OpcodeDescriptor]] = {
    fork: {d.mnemonic: d for d in entries if d.is_assigned}
    for fork, entries in _TABLES.items()
}


def describe(opcode: int, fork: Hardfork = LATEST) -> OpcodeDescriptor:
    """Return the descriptor for a byte value under ``fork``.

    Total over 0..255: unassigned bytes get an ``UNKNOWN_XX`` descriptor.
    Raises ValueError for values that are not a byte.
    """
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"Opcode must be a byte value, got {opcode}")
    return _TABLES[fork][opcode]


def by_mnemonic(mnemonic: str, fork: Hardfork = LATEST) -> OpcodeDescriptor:
    """Reverse lookup by mnemonic. Raises KeyError if ``fork`` doesn't define it."""
    try:
        return _BY_MNEMONIC[fork][mnemonic.upper()]
    except KeyError:
        raise KeyError(f"{mnemonic!r} is not an opcode in {fork.value}") from None


def table(fork: Hardfork = LATEST) -> tuple[OpcodeDescriptor, ...]:
    """All 256 descriptors for ``fork``, indexed by byte value."""
    return _TABLES[fork]
