"""Hardcoded bytecode fixtures for testing.

Short hand-assembled samples rather than full deployed contracts. Each one
exercises a decoding edge: hidden jumpdests, truncation, unassigned bytes.
"""

# Solidity-style prologue with a callvalue check
# 0x00 PUSH1 0x80, 0x02 PUSH1 0x40, 0x04 MSTORE, 0x05 CALLVALUE, 0x06 DUP1,
# 0x07 ISZERO, 0x08 PUSH1 0x0f, 0x0a JUMPI, 0x0b PUSH1 0x00, 0x0d DUP1,
# 0x0e REVERT, 0x0f JUMPDEST, 0x10 POP, 0x11 STOP
CALLVALUE_GUARD = (
    "6080604052"          # PUSH1 0x80 PUSH1 0x40 MSTORE
    "348015"              # CALLVALUE DUP1 ISZERO
    "600f57"              # PUSH1 0x0f JUMPI
    "600080fd"            # PUSH1 0x00 DUP1 REVERT
    "5b5000"              # JUMPDEST POP STOP
)
CALLVALUE_GUARD_OFFSETS = [0, 2, 4, 5, 6, 7, 8, 10, 11, 13, 14, 15, 16, 17]

# 0x5b bytes inside a PUSH2 payload, then a real JUMPDEST at offset 3
HIDDEN_JUMPDEST = (
    "615b5b"              # PUSH2 0x5b5b
    "5b"                  # JUMPDEST
)

# PUSH32 whose whole payload is 0x5b, followed by one real JUMPDEST at 33
PUSH32_OF_JUMPDESTS = "7f" + "5b" * 32 + "5b"

# Function dispatcher fragment: PUSH4 selector, EQ, PUSH2 target, JUMPI
DISPATCHER = (
    "63a9059cbb"          # PUSH4 transfer(address,uint256)
    "14"                  # EQ
    "61000b"              # PUSH2 0x000b
    "57"                  # JUMPI
    "00"                  # STOP
    "5b"                  # JUMPDEST
)

# Trailing PUSH20 with only 3 payload bytes
TRUNCATED_PUSH20 = "6001" + "73" + "aabbcc"

# Every byte value once, in order
ALL_BYTES = bytes(range(256))
