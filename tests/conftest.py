import logging

import pytest

from evm_asm.asm.disassembler import disassemble_hex
from tests.fixtures.bytecodes import CALLVALUE_GUARD


@pytest.fixture()
def guard_module():
    return disassemble_hex(CALLVALUE_GUARD)


@pytest.fixture()
def clean_package_logger():
    """Remove handlers installed by configure_logging after the test."""
    pkg_logger = logging.getLogger("evm_asm")
    before = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield pkg_logger
    for h in list(pkg_logger.handlers):
        if h not in before:
            pkg_logger.removeHandler(h)
    pkg_logger.setLevel(level)
