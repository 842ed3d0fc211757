"""Ethereum hardforks that changed the instruction set, in activation order."""

from __future__ import annotations

from enum import Enum


class Hardfork(str, Enum):
    FRONTIER = "frontier"
    HOMESTEAD = "homestead"  # EIP-7: DELEGATECALL
    BYZANTIUM = "byzantium"  # EIP-140, EIP-211, EIP-214
    CONSTANTINOPLE = "constantinople"  # EIP-145, EIP-1014, EIP-1052
    ISTANBUL = "istanbul"  # EIP-1344, EIP-1884
    LONDON = "london"  # EIP-3198
    PARIS = "paris"  # EIP-4399
    SHANGHAI = "shanghai"  # EIP-3855
    CANCUN = "cancun"  # EIP-1153, EIP-4844, EIP-5656, EIP-7516

    @property
    def order(self) -> int:
        return _ORDER.index(self)

    def is_active_in(self, fork: Hardfork) -> bool:
        """True if this fork's changes are live on a chain running ``fork``."""
        return self.order <= fork.order

    @classmethod
    def parse(cls, name: str) -> Hardfork:
        """Look up a fork by name, case-insensitively.

        Raises ValueError naming the known forks if ``name`` is not one.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            known = ", ".join(f.value for f in _ORDER)
            raise ValueError(f"Unknown hardfork {name!r} (expected one of: {known})") from None


_ORDER: list[Hardfork] = list(Hardfork)

LATEST = Hardfork.CANCUN
