"""
Custom exceptions for the SMILES parser.

Every parse failure is a ParseError (or a subclass naming the kind of
failure) carrying the input, the offset of the offending character and,
where known, what the grammar expected and what it found instead.
"""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""

    pass


class ParseError(ChemError):
    """Error during SMILES parsing.

    Attributes:
        message: Description of what went wrong.
        smiles: The original SMILES string being parsed.
        position: Character offset in the SMILES string where the error occurred.
        expected: What the grammar allowed at that offset.
        found: What was actually there (None at end of input).
    """

    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        *,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.message = message
        self.smiles = smiles
        self.position = position
        self.expected = expected
        self.found = found

        # Build detailed error message
        parts = [message]
        if smiles is not None and position is not None:
            parts.append(f"\n  {smiles}")
            parts.append(f"\n  {' ' * position}^")
        elif smiles is not None:
            parts.append(f" in: {smiles}")

        super().__init__("".join(parts))


class UnknownElementError(ParseError):
    """Element symbol not in the recognized table.

    Attributes:
        symbol: The rejected symbol text.
    """

    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        *,
        symbol: str | None = None,
        **kwargs,
    ) -> None:
        self.symbol = symbol
        if symbol is not None:
            kwargs["found"] = symbol
        super().__init__(message, smiles, position, **kwargs)


class RingError(ParseError):
    """Error related to ring closures in SMILES.

    Attributes:
        ring_index: The problematic ring closure label.
    """

    def __init__(
        self,
        message: str,
        smiles: str | None = None,
        position: int | None = None,
        *,
        ring_index: int | None = None,
        **kwargs,
    ) -> None:
        self.ring_index = ring_index
        super().__init__(message, smiles, position, **kwargs)


class BranchError(ParseError):
    """Unmatched ``(`` or ``)``."""

    pass


class DisconnectionError(ParseError):
    """Bond symbol or ring-closure label directly after a ``.``."""

    pass
