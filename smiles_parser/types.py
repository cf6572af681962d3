"""
Core molecular data types.

This module defines the values a parse produces: Atom, Bond and Molecule,
plus the Chirality tag carried by bracket atoms. All of them are frozen
dataclasses; atoms and bonds reference each other only through integer
indices into the molecule's atom and bond sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .elements import BondDirection, BondOrder, ChiralClass, Element


@dataclass(frozen=True, slots=True)
class Chirality:
    """Chirality tag of a bracket atom.

    Attributes:
        chiral_class: The chirality class.
        number: Permutation number for the numbered classes, None for ``@``/``@@``.
    """

    chiral_class: ChiralClass
    number: int | None = None

    def __post_init__(self) -> None:
        if self.chiral_class.is_shorthand:
            if self.number is not None:
                raise ValueError(f"{self.chiral_class.tag} takes no number")
        elif self.number is None or not 1 <= self.number <= self.chiral_class.max_number:
            raise ValueError(
                f"@{self.chiral_class.tag} number must be in "
                f"1..{self.chiral_class.max_number}, got {self.number}"
            )

    def __str__(self) -> str:
        if self.chiral_class.is_shorthand:
            return self.chiral_class.tag
        return f"@{self.chiral_class.tag}{self.number}"


@dataclass(frozen=True, slots=True)
class Bond:
    """Represents a bond between two atoms.

    Attributes:
        idx: Index of this bond in the molecule.
        atom1_idx: Index of the first atom (the earlier one in parse order).
        atom2_idx: Index of the second atom.
        order: Bond order as written; UNSPECIFIED when no order symbol was given.
        direction: Cis/trans marker ('/' or '\\'), None for most bonds.
        ring_label: Label of the ring closure that produced this bond, if any.
    """

    idx: int
    atom1_idx: int
    atom2_idx: int
    order: BondOrder = BondOrder.UNSPECIFIED
    direction: BondDirection | None = None
    ring_label: int | None = None

    @property
    def is_ring_closure(self) -> bool:
        return self.ring_label is not None

    @property
    def is_explicit(self) -> bool:
        """Whether a bond symbol was written for this bond."""
        return self.order != BondOrder.UNSPECIFIED or self.direction is not None

    def other_atom(self, atom_idx: int) -> int:
        """Get the index of the atom on the other end of this bond.

        Raises:
            ValueError: If atom_idx is not part of this bond.
        """
        if atom_idx == self.atom1_idx:
            return self.atom2_idx
        if atom_idx == self.atom2_idx:
            return self.atom1_idx
        raise ValueError(f"Atom {atom_idx} not in bond {self.idx}")

    def __contains__(self, atom_idx: int) -> bool:
        """Check if atom is part of this bond."""
        return atom_idx in (self.atom1_idx, self.atom2_idx)


@dataclass(frozen=True, slots=True)
class Atom:
    """Represents an atom in a molecule.

    Attributes:
        idx: Index of this atom in the molecule, assigned in parse order.
        element: Element (the wildcard pseudo-element for ``*``).
        aromatic: Whether the symbol was written in lowercase.
        isotope: Mass number, bracket form only.
        chirality: Chirality tag, bracket form only.
        hydrogen_count: Hydrogen count written in brackets (0 if omitted there);
            None for organic-subset atoms, whose hydrogens follow default valence.
        charge: Formal charge.
        atom_class: Atom class (``:n``) for atom mapping.
        bracketed: Whether the atom was written in bracket form.
        position: Offset of the atom's first character in the input.
    """

    idx: int
    element: Element
    aromatic: bool = False
    isotope: int | None = None
    chirality: Chirality | None = None
    hydrogen_count: int | None = None
    charge: int = 0
    atom_class: int | None = None
    bracketed: bool = False
    position: int | None = None

    @property
    def symbol(self) -> str:
        """Symbol as written, lowercase for aromatic atoms."""
        sym = self.element.symbol
        return sym.lower() if self.aromatic else sym

    @property
    def atomic_number(self) -> int:
        return self.element.atomic_number

    @property
    def is_wildcard(self) -> bool:
        return self.element.is_wildcard


@dataclass(frozen=True)
class Molecule:
    """Represents a parsed molecular structure.

    Atom indices are stable: ``atoms[i].idx == i`` and every bond refers to
    atoms by index, so consumers can build adjacency structures with one pass
    over ``bonds``.

    Attributes:
        atoms: Atoms in parse order.
        bonds: Bonds in the order they were formed.
        components: Connected components, each a sorted tuple of atom indices,
            ordered by their smallest index.

    Example:
        >>> from smiles_parser import parse
        >>> mol = parse("[Na+].[Cl-]")
        >>> mol.components
        ((0,), (1,))
    """

    atoms: tuple[Atom, ...] = ()
    bonds: tuple[Bond, ...] = ()
    components: tuple[tuple[int, ...], ...] = field(init=False)
    _atom_bonds: tuple[tuple[int, ...], ...] = field(init=False, repr=False, compare=False)
    _atom_components: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        atom_bonds: list[list[int]] = [[] for _ in self.atoms]
        for i, atom in enumerate(self.atoms):
            if atom.idx != i:
                raise ValueError(f"Atom at position {i} has index {atom.idx}")
        for i, bond in enumerate(self.bonds):
            if bond.idx != i:
                raise ValueError(f"Bond at position {i} has index {bond.idx}")
            for atom_idx in (bond.atom1_idx, bond.atom2_idx):
                if not 0 <= atom_idx < len(self.atoms):
                    raise IndexError(f"Atom index out of bounds in bond {i}: {atom_idx}")
            if bond.atom1_idx == bond.atom2_idx:
                raise ValueError(f"Bond {i} connects atom {bond.atom1_idx} to itself")
            atom_bonds[bond.atom1_idx].append(i)
            atom_bonds[bond.atom2_idx].append(i)
        object.__setattr__(self, "_atom_bonds", tuple(tuple(b) for b in atom_bonds))
        object.__setattr__(self, "components", self._find_components())
        atom_components = [0] * len(self.atoms)
        for i, component in enumerate(self.components):
            for atom_idx in component:
                atom_components[atom_idx] = i
        object.__setattr__(self, "_atom_components", tuple(atom_components))

    def __len__(self) -> int:
        """Return number of atoms."""
        return len(self.atoms)

    def __iter__(self) -> Iterator[Atom]:
        """Iterate over atoms."""
        return iter(self.atoms)

    def __getitem__(self, idx: int) -> Atom:
        """Get atom by index."""
        return self.atoms[idx]

    @property
    def num_atoms(self) -> int:
        """Number of atoms in the molecule."""
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        """Number of bonds in the molecule."""
        return len(self.bonds)

    @property
    def is_connected(self) -> bool:
        """Check if molecule is a single connected component."""
        return len(self.components) <= 1

    def atom_bonds(self, atom_idx: int) -> Iterator[Bond]:
        """Iterate over bonds connected to an atom."""
        for bond_idx in self._atom_bonds[atom_idx]:
            yield self.bonds[bond_idx]

    def neighbors(self, atom_idx: int) -> Iterator[int]:
        """Iterate over indices of atoms bonded to an atom."""
        for bond in self.atom_bonds(atom_idx):
            yield bond.other_atom(atom_idx)

    def degree(self, atom_idx: int) -> int:
        """Number of bonds (ring closures included) at an atom."""
        return len(self._atom_bonds[atom_idx])

    def get_bond_between(self, atom1_idx: int, atom2_idx: int) -> Bond | None:
        """Find the bond between two atoms, or None if they are not bonded."""
        for bond in self.atom_bonds(atom1_idx):
            if atom2_idx in bond:
                return bond
        return None

    def effective_order(self, bond: Bond) -> BondOrder:
        """Resolve a bond's order in context.

        An UNSPECIFIED bond is aromatic between two aromatic atoms and single
        otherwise; written orders are returned unchanged.
        """
        if bond.order != BondOrder.UNSPECIFIED:
            return bond.order
        if self.atoms[bond.atom1_idx].aromatic and self.atoms[bond.atom2_idx].aromatic:
            return BondOrder.AROMATIC
        return BondOrder.SINGLE

    def component_of(self, atom_idx: int) -> int:
        """Index into ``components`` of the component containing an atom."""
        if not 0 <= atom_idx < len(self.atoms):
            raise IndexError(f"Atom index out of bounds: {atom_idx}")
        return self._atom_components[atom_idx]

    def _find_components(self) -> tuple[tuple[int, ...], ...]:
        visited: set[int] = set()
        components: list[tuple[int, ...]] = []

        for start in range(len(self.atoms)):
            if start in visited:
                continue

            # DFS to find component
            component: list[int] = []
            stack = [start]
            visited.add(start)

            while stack:
                atom_idx = stack.pop()
                component.append(atom_idx)

                for neighbor in self.neighbors(atom_idx):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)

            components.append(tuple(sorted(component)))

        return tuple(components)
