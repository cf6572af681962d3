"""
SMILES string parser.

This module assembles atoms, bonds, ring closures and branches into a
Molecule in a single left-to-right pass.

Supported OpenSMILES features:
    - Organic subset atoms, aromatic lowercase atoms and the wildcard ``*``
    - Bracket atoms with isotope, chirality, hydrogen count, charge, class
    - Single, double, triple, quadruple and aromatic bonds
    - Cis/trans bond markers (``/`` and ``\\``)
    - Ring closures (``0``-``9`` and ``%nn``), including reused labels
    - Branches (parentheses), nested to any depth
    - Disconnected components (``.``)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NoReturn

from .atoms import AtomSpec, is_atom_start, parse_atom
from .bonds import BondSymbol, parse_bond_symbol
from .branches import BranchStack
from .elements import BondOrder
from .exceptions import BranchError, ChemError, DisconnectionError, ParseError, RingError
from .rings import RingClosureTable, read_ring_label
from .scanner import Scanner
from .types import Atom, Bond, Molecule

logger = logging.getLogger(__name__)


@dataclass
class _ParserState:
    """Mutable state for the chain assembler."""

    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    bonded_pairs: set[frozenset[int]] = field(default_factory=set)

    # Atom new bonds start from; None at the start and after '.'
    current_atom: int | None = None

    # '.' was read and no atom has followed yet
    after_dot: bool = False

    # '(' was read and nothing has been placed in the branch yet
    branch_opened: bool = False


class SmilesParser:
    """SMILES string parser.

    Parses a SMILES (Simplified Molecular Input Line Entry System) string
    into an immutable Molecule. Ring-closure labels and open branches are
    tracked per instance, so separate parsers never share state.

    Example:
        >>> parser = SmilesParser("CC(C)C")
        >>> mol = parser.parse()
        >>> [(b.atom1_idx, b.atom2_idx) for b in mol.bonds]
        [(0, 1), (1, 2), (1, 3)]

    For convenience, use the module-level `parse()` function:
        >>> from smiles_parser import parse
        >>> mol = parse("CCO")
    """

    def __init__(self, smiles: str | bytes) -> None:
        """Initialize parser with a SMILES string.

        Args:
            smiles: SMILES string to parse. Bytes are decoded as ASCII.

        Raises:
            ParseError: If the input contains non-ASCII characters.
        """
        self._smiles = _decode(smiles)
        self._scanner = Scanner(self._smiles)
        self._rings = RingClosureTable(self._smiles)
        self._branches = BranchStack(self._smiles)
        self._state = _ParserState()
        self._result: Molecule | None = None
        self._error: ParseError | None = None

    @property
    def smiles(self) -> str:
        return self._smiles

    def parse(self) -> Molecule:
        """Parse the SMILES string into a Molecule.

        The outcome is cached: later calls return the same Molecule, or
        raise the same error again.

        Returns:
            Parsed Molecule object.

        Raises:
            ParseError: If SMILES syntax is invalid. Subclasses name the
                failure: UnknownElementError, RingError, BranchError,
                DisconnectionError.
        """
        if self._error is not None:
            raise self._error
        if self._result is not None:
            return self._result
        try:
            mol = self._parse()
        except ParseError as e:
            self._error = e
            logger.debug("Rejected SMILES %r at offset %s: %s", self._smiles, e.position, e.message)
            raise
        logger.debug(
            "Parsed SMILES %r: %d atoms, %d bonds, %d components",
            self._smiles, mol.num_atoms, mol.num_bonds, len(mol.components),
        )
        self._result = mol
        return mol

    def _parse(self) -> Molecule:
        tok = self._scanner

        while not tok.is_eof():
            char = tok.peek()

            if char == "(":
                self._open_branch()
            elif char == ")":
                self._close_branch()
            elif char == ".":
                self._disconnect()
            else:
                self._parse_bond_and_target()

        if self._state.after_dot:
            raise tok.error("Expected atom after '.', got end of input", expected="atom")
        self._branches.check_empty()
        self._rings.check_closed()

        return Molecule(tuple(self._state.atoms), tuple(self._state.bonds))

    def _open_branch(self) -> None:
        tok = self._scanner
        state = self._state

        if state.current_atom is None:
            if state.after_dot:
                raise tok.error("Expected atom after '.', got '('", expected="atom")
            raise tok.error("Branch opened without a preceding atom", cls=BranchError, expected="atom")
        if state.branch_opened:
            raise tok.error("Branch cannot start with '('", expected="bond, atom or ring-closure label")

        self._branches.push(state.current_atom, tok.position)
        tok.next()
        state.branch_opened = True

    def _close_branch(self) -> None:
        tok = self._scanner
        state = self._state

        if state.after_dot:
            raise tok.error("Expected atom after '.', got ')'", expected="atom")
        if state.branch_opened:
            raise tok.error("Empty branch '()'", expected="bond, atom or ring-closure label")

        state.current_atom = self._branches.pop(tok.position)
        tok.next()

    def _disconnect(self) -> None:
        tok = self._scanner
        state = self._state

        if state.current_atom is None:
            if state.after_dot:
                raise tok.error("Expected atom after '.', got '.'", expected="atom")
            raise tok.error("'.' must follow an atom", expected="atom")

        tok.next()
        state.current_atom = None
        state.after_dot = True
        state.branch_opened = False

    def _parse_bond_and_target(self) -> None:
        """Parse an optional bond symbol and the atom or ring label it leads to."""
        tok = self._scanner
        start = tok.position

        symbol = parse_bond_symbol(tok)
        char = tok.peek()

        if char is not None and ("0" <= char <= "9" or char == "%"):
            self._ring_closure(symbol, start)
        elif is_atom_start(char):
            self._attach_atom(symbol, start)
        elif symbol is not None:
            raise tok.error(
                f"Bond symbol '{symbol}' must be followed by an atom or ring-closure label",
                expected="atom or ring-closure label",
            )
        else:
            raise tok.error(f"Unexpected character: '{char}'")

    def _attach_atom(self, symbol: BondSymbol | None, start: int) -> None:
        state = self._state

        if state.current_atom is None and symbol is not None:
            self._raise_no_origin(f"Bond symbol '{symbol}'", start)

        idx = len(state.atoms)
        state.atoms.append(_make_atom(idx, parse_atom(self._scanner)))

        if state.current_atom is not None:
            self._add_bond(state.current_atom, idx, symbol)

        state.current_atom = idx
        state.after_dot = False
        state.branch_opened = False

    def _ring_closure(self, symbol: BondSymbol | None, start: int) -> None:
        state = self._state

        if state.current_atom is None:
            self._raise_no_origin("Ring-closure label", start)

        label = read_ring_label(self._scanner)
        closure = self._rings.open_or_close(label, symbol, state.current_atom, start)

        if closure is not None:
            pair = frozenset((closure.atom1_idx, closure.atom2_idx))
            if pair in state.bonded_pairs:
                raise RingError(
                    f"Ring closure {label} duplicates the bond between atoms "
                    f"{closure.atom1_idx} and {closure.atom2_idx}",
                    self._smiles,
                    start,
                    ring_index=label,
                )
            self._add_bond(closure.atom1_idx, closure.atom2_idx, closure.symbol, label)

        state.branch_opened = False

    def _add_bond(
        self,
        atom1_idx: int,
        atom2_idx: int,
        symbol: BondSymbol | None,
        ring_label: int | None = None,
    ) -> None:
        state = self._state
        state.bonds.append(Bond(
            idx=len(state.bonds),
            atom1_idx=atom1_idx,
            atom2_idx=atom2_idx,
            order=symbol.order if symbol is not None else BondOrder.UNSPECIFIED,
            direction=symbol.direction if symbol is not None else None,
            ring_label=ring_label,
        ))
        state.bonded_pairs.add(frozenset((atom1_idx, atom2_idx)))

    def _raise_no_origin(self, what: str, position: int) -> NoReturn:
        """Reject a bond or ring label that has no atom to start from."""
        if self._state.after_dot:
            raise self._scanner.error(
                f"{what} cannot directly follow '.'",
                cls=DisconnectionError,
                position=position,
                expected="atom",
            )
        raise self._scanner.error(f"{what} has no preceding atom", position=position, expected="atom")


def _make_atom(idx: int, spec: AtomSpec) -> Atom:
    return Atom(
        idx=idx,
        element=spec.element,
        aromatic=spec.aromatic,
        isotope=spec.isotope,
        chirality=spec.chirality,
        hydrogen_count=spec.hydrogen_count,
        charge=spec.charge,
        atom_class=spec.atom_class,
        bracketed=spec.bracketed,
        position=spec.position,
    )


def _decode(smiles: str | bytes) -> str:
    if isinstance(smiles, (bytes, bytearray)):
        try:
            smiles = bytes(smiles).decode("ascii")
        except UnicodeDecodeError as e:
            raise ParseError(
                "SMILES must be ASCII",
                bytes(smiles).decode("ascii", "replace"),
                e.start,
            ) from e
    elif not isinstance(smiles, str):
        raise TypeError(f"SMILES must be str or bytes, not {type(smiles).__name__}")

    if not smiles.isascii():
        pos = next(i for i, c in enumerate(smiles) if not c.isascii())
        raise ParseError(f"Non-ASCII character {smiles[pos]!r}", smiles, pos, found=smiles[pos])
    return smiles


def parse(smiles: str | bytes) -> Molecule:
    """Parse a SMILES string into a Molecule.

    This is a convenience function that creates a SmilesParser and
    calls parse().

    Args:
        smiles: SMILES string to parse.

    Returns:
        Parsed Molecule object.

    Raises:
        ParseError: If SMILES syntax is invalid.

    Example:
        >>> mol = parse("C1CCCCC1")
        >>> len(mol.atoms), len(mol.bonds)
        (6, 6)
    """
    return SmilesParser(smiles).parse()


def is_valid_smiles(smiles: str | bytes) -> bool:
    """Check whether a string parses as SMILES."""
    try:
        parse(smiles)
    except ChemError:
        return False
    return True
