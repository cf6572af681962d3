"""Bond symbol parsing."""

from __future__ import annotations

from enum import Enum
from typing import Final

from .elements import BondDirection, BondOrder
from .scanner import Scanner


class BondSymbol(Enum):
    """A bond symbol as written before an atom or ring-closure label.

    Order symbols and direction symbols are exclusive: ``/`` and ``\\``
    leave the order unspecified.
    """

    SINGLE = "-"
    DOUBLE = "="
    TRIPLE = "#"
    QUADRUPLE = "$"
    AROMATIC = ":"
    UP = "/"
    DOWN = "\\"

    @property
    def order(self) -> BondOrder:
        return _SYMBOL_ORDERS[self]

    @property
    def direction(self) -> BondDirection | None:
        return _SYMBOL_DIRECTIONS.get(self)

    def __str__(self) -> str:
        return self.value


_SYMBOL_ORDERS: Final[dict[BondSymbol, BondOrder]] = {
    BondSymbol.SINGLE: BondOrder.SINGLE,
    BondSymbol.DOUBLE: BondOrder.DOUBLE,
    BondSymbol.TRIPLE: BondOrder.TRIPLE,
    BondSymbol.QUADRUPLE: BondOrder.QUADRUPLE,
    BondSymbol.AROMATIC: BondOrder.AROMATIC,
    BondSymbol.UP: BondOrder.UNSPECIFIED,
    BondSymbol.DOWN: BondOrder.UNSPECIFIED,
}

_SYMBOL_DIRECTIONS: Final[dict[BondSymbol, BondDirection]] = {
    BondSymbol.UP: BondDirection.UP,
    BondSymbol.DOWN: BondDirection.DOWN,
}

# Bond character mapping: char -> symbol
BOND_SYMBOLS: Final[dict[str, BondSymbol]] = {s.value: s for s in BondSymbol}


def is_bond_symbol(char: str | None) -> bool:
    return char is not None and char in BOND_SYMBOLS


def parse_bond_symbol(scanner: Scanner) -> BondSymbol | None:
    """Consume an optional bond symbol.

    Returns:
        The symbol, or None if the next character is not a bond symbol
        (an implicit bond).

    Raises:
        ParseError: If a second bond symbol follows immediately.
    """
    if not is_bond_symbol(scanner.peek()):
        return None
    symbol = BOND_SYMBOLS[scanner.next()]
    if is_bond_symbol(scanner.peek()):
        raise scanner.error(
            f"Consecutive bond symbols '{symbol}{scanner.peek()}'",
            expected="atom or ring-closure label",
        )
    return symbol
