"""
Atom descriptor parsing.

Reads one atom token, either from the organic subset (``C``, ``Cl``, ``c``,
``*``) or in bracket form::

    [ isotope? symbol chirality? hcount? charge? class? ]

e.g. ``[13CH4]``, ``[C@@H]``, ``[NH4+]``, ``[Fe+3]``, ``[OH-:7]``. Fields
must appear in that order; anything else is a syntax error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, NoReturn

from .elements import (
    AROMATIC_ORGANIC_SUBSET,
    TWO_LETTER_ORGANIC,
    WILDCARD,
    ChiralClass,
    Element,
    is_organic_symbol,
)
from .exceptions import UnknownElementError
from .scanner import Scanner
from .types import Chirality

# Largest charge magnitude OpenSMILES accepts
MAX_CHARGE: Final[int] = 15

# What may still follow at each point of a bracket atom, for error messages
_AFTER_SYMBOL: Final[str] = "chirality, hydrogen count, charge, atom class or ']'"
_AFTER_CHIRALITY: Final[str] = "hydrogen count, charge, atom class or ']'"
_AFTER_HCOUNT: Final[str] = "charge, atom class or ']'"
_AFTER_CHARGE: Final[str] = "atom class or ']'"


@dataclass(frozen=True, slots=True)
class AtomSpec:
    """Properties of one parsed atom token, before it is given an index."""

    element: Element
    aromatic: bool = False
    isotope: int | None = None
    chirality: Chirality | None = None
    hydrogen_count: int | None = None
    charge: int = 0
    atom_class: int | None = None
    bracketed: bool = False
    position: int = 0


def is_atom_start(char: str | None) -> bool:
    """Whether ``char`` can begin an atom token."""
    return char is not None and (char == "[" or char == "*" or char.isalpha())


def parse_atom(scanner: Scanner) -> AtomSpec:
    """Parse one atom token at the scanner position.

    Raises:
        ParseError: On malformed bracket atoms or a missing ``]``.
        UnknownElementError: On symbols outside the element table.
    """
    if scanner.peek() == "[":
        return parse_bracket_atom(scanner)
    return parse_organic_atom(scanner)


def parse_organic_atom(scanner: Scanner) -> AtomSpec:
    """Parse an organic subset atom (not in brackets)."""
    start = scanner.position
    char1 = scanner.peek()

    if char1 == "*":
        scanner.next()
        return AtomSpec(WILDCARD, position=start)

    if char1 is None or not char1.isalpha():
        raise scanner.error("Expected atom", expected="atom")

    # Two-letter symbols first so Cl is not read as C followed by l
    char2 = scanner.peek(1)
    if char2 is not None and char1 + char2 in TWO_LETTER_ORGANIC:
        scanner.skip(2)
        return AtomSpec(Element.from_symbol(char1 + char2), position=start)

    if is_organic_symbol(char1):
        scanner.next()
        if char1 in AROMATIC_ORGANIC_SUBSET:
            return AtomSpec(Element.from_aromatic_symbol(char1), aromatic=True, position=start)
        return AtomSpec(Element.from_symbol(char1), position=start)

    _raise_not_organic(scanner, char1, char2)


def _raise_not_organic(scanner: Scanner, char1: str, char2: str | None) -> NoReturn:
    start = scanner.position
    prev = scanner.string[start - 1] if start > 0 else ""

    symbol = char1
    if char1.isupper() and char2 is not None and char2.islower() and Element.from_symbol(char1 + char2):
        symbol = char1 + char2
        message = f"Element '{symbol}' must be written in brackets, e.g. [{symbol}]"
    elif char1.isupper() and Element.from_symbol(char1):
        message = f"Element '{symbol}' must be written in brackets, e.g. [{symbol}]"
    elif char1.islower() and prev.isupper() and Element.from_symbol(prev + char1):
        # "Na" reads as N followed by a stray "a"
        symbol = prev + char1
        start -= 1
        message = f"Element '{symbol}' must be written in brackets, e.g. [{symbol}]"
    elif char1.islower():
        message = f"'{symbol}' is not a valid aromatic element symbol"
    else:
        message = f"Unknown element symbol '{symbol}'"
    raise scanner.error(
        message, cls=UnknownElementError, position=start,
        symbol=symbol, expected="organic subset atom",
    )


def parse_bracket_atom(scanner: Scanner) -> AtomSpec:
    """Parse a bracket atom ``[...]``."""
    start = scanner.position
    scanner.expect("[")

    isotope = scanner.read_number()
    element, aromatic = _parse_element_symbol(scanner)

    # Fields that may still follow, for the error on a stray character
    still_allowed = _AFTER_SYMBOL

    chirality = None
    if scanner.peek() == "@":
        chirality = parse_chirality(scanner)
        still_allowed = _AFTER_CHIRALITY

    hydrogen_count = 0
    if scanner.peek() == "H":
        scanner.next()
        h_count = scanner.read_number(limit=1)
        hydrogen_count = 1 if h_count is None else h_count
        still_allowed = _AFTER_HCOUNT

    charge = 0
    if scanner.peek() in ("+", "-"):
        charge = parse_charge(scanner)
        still_allowed = _AFTER_CHARGE

    atom_class = None
    if scanner.peek() == ":":
        scanner.next()
        atom_class = scanner.read_number()
        if atom_class is None:
            raise scanner.error("Expected atom class number after ':'", expected="digit")
        still_allowed = "']'"

    if scanner.peek() != "]":
        raise scanner.error(_unexpected_in_bracket(scanner.peek(), still_allowed), expected="]")
    scanner.next()

    return AtomSpec(
        element,
        aromatic=aromatic,
        isotope=isotope,
        chirality=chirality,
        hydrogen_count=hydrogen_count,
        charge=charge,
        atom_class=atom_class,
        bracketed=True,
        position=start,
    )


def _parse_element_symbol(scanner: Scanner) -> tuple[Element, bool]:
    """Read the mandatory element symbol of a bracket atom."""
    char1 = scanner.peek()

    if char1 == "*":
        scanner.next()
        return WILDCARD, False

    if char1 is None or not char1.isalpha():
        raise scanner.error(
            "Expected element symbol in bracket atom, got "
            + ("end of input" if char1 is None else repr(char1)),
            expected="element symbol",
        )

    char2 = scanner.peek(1)

    if char1.isupper():
        # Prefer two-letter symbols (Cl, Cs, Sc...)
        if char2 is not None and char2.islower():
            elem = Element.from_symbol(char1 + char2)
            if elem is not None:
                scanner.skip(2)
                return elem, False
        elem = Element.from_symbol(char1)
        if elem is not None:
            scanner.next()
            return elem, False
        symbol = char1 + char2 if char2 is not None and char2.islower() else char1
        raise scanner.error(
            f"Unknown element symbol '{symbol}'", cls=UnknownElementError,
            symbol=symbol, expected="element symbol",
        )

    # Lowercase: aromatic symbols (se, as, then b c n o p s)
    if char2 is not None:
        elem = Element.from_aromatic_symbol(char1 + char2)
        if elem is not None:
            scanner.skip(2)
            return elem, True
    elem = Element.from_aromatic_symbol(char1)
    if elem is not None:
        scanner.next()
        return elem, True
    symbol = char1 + char2 if char2 is not None and char2.islower() else char1
    raise scanner.error(
        f"'{symbol}' is not a valid aromatic element symbol", cls=UnknownElementError,
        symbol=symbol, expected="element symbol",
    )


def parse_chirality(scanner: Scanner) -> Chirality:
    """Parse a chirality tag: ``@``, ``@@`` or ``@`` + class + number."""
    start = scanner.position
    scanner.expect("@")

    if scanner.peek() == "@":
        scanner.next()
        return Chirality(ChiralClass.CLOCKWISE)

    tag = (scanner.peek() or "") + (scanner.peek(1) or "")
    chiral_class = ChiralClass.from_tag(tag)
    if chiral_class is None:
        return Chirality(ChiralClass.ANTICLOCKWISE)

    scanner.skip(2)
    number_pos = scanner.position
    number = scanner.read_number(limit=2)
    if number is None or not 1 <= number <= chiral_class.max_number:
        raise scanner.error(
            f"Chirality @{tag} requires a number in 1..{chiral_class.max_number}, "
            f"got {scanner.string[start:scanner.position]!r}",
            position=number_pos,
            expected=f"1..{chiral_class.max_number}",
        )
    return Chirality(chiral_class, number)


def parse_charge(scanner: Scanner) -> int:
    """Parse a charge (``+``, ``-``, ``++``, ``--``, ``+2``, ``-3``...)."""
    start = scanner.position
    sign_char = scanner.next()
    sign = 1 if sign_char == "+" else -1

    # Count consecutive + or -
    count = 1
    while scanner.peek() == sign_char:
        scanner.next()
        count += 1

    num = scanner.read_number(limit=2)
    if num is not None and count > 1:
        raise scanner.error(
            "Repeated charge signs cannot be followed by a number",
            position=start,
            expected=f"'{sign_char}' or '{sign_char}<n>'",
        )

    magnitude = count if num is None else num
    if magnitude > MAX_CHARGE:
        raise scanner.error(
            f"Charge magnitude {magnitude} exceeds {MAX_CHARGE}",
            position=start,
            expected=f"charge in -{MAX_CHARGE}..+{MAX_CHARGE}",
        )
    return sign * magnitude


def _unexpected_in_bracket(char: str | None, still_allowed: str) -> str:
    if char is None:
        return "Unterminated bracket atom, expected ']'"
    return f"Unexpected {char!r} in bracket atom, expected {still_allowed}"
