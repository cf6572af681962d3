"""
Ring-closure bookkeeping.

A ring-closure label (``1``, ``%12``) is open between its first and second
occurrence. Different labels are independent and may nest or overlap
freely; a label can be reused once it has been closed (``C1CC1CC1CC1``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .bonds import BondSymbol
from .exceptions import RingError
from .scanner import Scanner


@dataclass(frozen=True, slots=True)
class RingClosure:
    """A resolved ring closure: the bond to add between two atoms."""

    atom1_idx: int
    atom2_idx: int
    label: int
    symbol: BondSymbol | None = None


@dataclass(slots=True)
class _OpenRing:
    atom_idx: int
    symbol: BondSymbol | None
    position: int


def read_ring_label(scanner: Scanner) -> int:
    """Read a ring-closure label: one digit, or ``%`` and two digits."""
    start = scanner.position

    if scanner.peek() == "%":
        scanner.next()
        label = scanner.read_number(limit=2)
        if label is None or scanner.position - start != 3:
            raise scanner.error(
                "Expected two digits after '%'",
                position=start,
                expected="%nn",
            )
        return label

    label = scanner.read_number(limit=1)
    if label is None:
        raise scanner.error("Expected ring-closure label", expected="digit or %nn")
    return label


@dataclass
class RingClosureTable:
    """Open ring-closure labels of one parse, keyed by label."""

    smiles: str = ""
    _open: dict[int, _OpenRing] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._open)

    def __contains__(self, label: int) -> bool:
        return label in self._open

    def open_or_close(
        self,
        label: int,
        symbol: BondSymbol | None,
        atom_idx: int,
        position: int,
    ) -> RingClosure | None:
        """Open ``label`` at ``atom_idx``, or close it if already open.

        Args:
            label: Ring-closure label.
            symbol: Bond symbol written before the label, if any.
            atom_idx: Current atom.
            position: Offset of the label (or its bond symbol) in the input.

        Returns:
            None when the label was opened, otherwise the closure to turn
            into a bond. Its symbol is whichever end specified one.

        Raises:
            RingError: On a label closing on the atom that opened it, or on
                different bond symbols at the two ends.
        """
        ring = self._open.get(label)
        if ring is None:
            self._open[label] = _OpenRing(atom_idx, symbol, position)
            return None

        if ring.atom_idx == atom_idx:
            raise RingError(
                f"Ring closure {_format_label(label)} opened and closed on the same atom",
                self.smiles,
                position,
                ring_index=label,
            )
        if ring.symbol is not None and symbol is not None and ring.symbol != symbol:
            raise RingError(
                f"Ring closure {_format_label(label)} has conflicting bond symbols "
                f"'{ring.symbol}' and '{symbol}'",
                self.smiles,
                position,
                ring_index=label,
                expected=str(ring.symbol),
                found=str(symbol),
            )

        del self._open[label]
        return RingClosure(ring.atom_idx, atom_idx, label, ring.symbol or symbol)

    def check_closed(self) -> None:
        """Raise if any label is still open.

        Raises:
            RingError: Naming the lowest open label, at its opening offset.
        """
        if not self._open:
            return
        unclosed = sorted(self._open)
        first = self._open[unclosed[0]]
        labels = ", ".join(_format_label(label) for label in unclosed)
        raise RingError(
            f"Unclosed ring closure label(s): {labels}",
            self.smiles,
            first.position,
            ring_index=unclosed[0],
        )


def _format_label(label: int) -> str:
    return str(label) if label < 10 else f"%{label:02d}"
