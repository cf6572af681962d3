"""Branch stack: the atoms to return to when a ``)`` closes a branch."""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import BranchError


@dataclass
class BranchStack:
    """Last-in-first-out stack of branch root atoms.

    Each entry is the atom that was current when ``(`` was read, together
    with the offset of that ``(`` for error reporting.
    """

    smiles: str = ""
    _atoms: list[int] = field(default_factory=list)
    _positions: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._atoms)

    def __bool__(self) -> bool:
        return bool(self._atoms)

    def push(self, atom_idx: int, position: int) -> None:
        self._atoms.append(atom_idx)
        self._positions.append(position)

    def pop(self, position: int) -> int:
        """Pop the innermost branch root.

        Raises:
            BranchError: If no branch is open (unmatched ``)``).
        """
        if not self._atoms:
            raise BranchError(
                "Unmatched ')': no open branch",
                self.smiles,
                position,
                found=")",
            )
        self._positions.pop()
        return self._atoms.pop()

    def check_empty(self) -> None:
        """Raise if a branch is still open at end of input.

        Raises:
            BranchError: Pointing at the innermost unmatched ``(``.
        """
        if self._atoms:
            raise BranchError(
                f"Unclosed branch: {len(self._atoms)} '(' without matching ')'",
                self.smiles,
                self._positions[-1],
                expected=")",
            )
