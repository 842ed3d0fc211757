import pytest

from evm_asm.asm.decoder import Instruction, decode
from evm_asm.asm.forks import Hardfork
from evm_asm.asm.opcodes import describe


def test_decode_single_byte():
    instr = decode(b"\x01", 0)
    assert instr == Instruction(describe(0x01), 0, b"", 1)
    assert instr.mnemonic == "ADD"
    assert instr.opcode == 0x01
    assert instr.end == 1


def test_decode_push_at_offset():
    code = bytes.fromhex("00610102ff")
    instr = decode(code, 1)
    assert instr.mnemonic == "PUSH2"
    assert instr.offset == 1
    assert instr.immediate == b"\x01\x02"
    assert instr.size == 3
    assert instr.end == 4


def test_decode_truncated_push():
    instr = decode(bytes.fromhex("7f0102"), 0)
    assert instr.mnemonic == "PUSH32"
    assert instr.immediate == b"\x01\x02"
    assert instr.size == 3
    assert instr.is_truncated


def test_decode_push_with_no_bytes_left():
    instr = decode(b"\x60", 0)
    assert instr.immediate == b""
    assert instr.size == 1
    assert instr.is_truncated


def test_decode_unassigned():
    instr = decode(b"\x0c", 0)
    assert instr.mnemonic == "UNKNOWN_0C"
    assert instr.size == 1
    assert not instr.is_truncated


def test_decode_every_byte_value():
    for value in range(256):
        instr = decode(bytes([value]), 0)
        assert instr.opcode == value
        assert instr.size == 1


def test_decode_respects_fork():
    assert decode(b"\x5f", 0, Hardfork.PARIS).mnemonic == "UNKNOWN_5F"
    assert decode(b"\x5f", 0, Hardfork.SHANGHAI).mnemonic == "PUSH0"


def test_decode_offset_out_of_range():
    with pytest.raises(IndexError):
        decode(b"\x00", 1)
    with pytest.raises(IndexError):
        decode(b"", 0)
    with pytest.raises(IndexError):
        decode(b"\x00", -1)


def test_immediate_value():
    assert decode(bytes.fromhex("610100"), 0).immediate_value == 256
    assert decode(b"\x5f", 0).immediate_value == 0
    assert decode(b"\x01", 0).immediate_value is None


def test_encode():
    instr = decode(bytes.fromhex("63a9059cbb"), 0)
    assert instr.encode() == bytes.fromhex("63a9059cbb")


def test_str():
    assert str(decode(bytes.fromhex("6001"), 0)) == "PUSH1 0x01"
    assert str(decode(b"\x00", 0)) == "STOP"
    assert str(decode(b"\x5f", 0)) == "PUSH0"
    assert str(decode(b"\x60", 0)) == "PUSH1 0x"
