"""
Chemical elements and grammar enumerations.

This module provides the closed element registry used by the parser, the
symbol subsets OpenSMILES allows outside brackets or in aromatic form, and
the enumerations for bond orders, bond directions and chirality classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Final, FrozenSet


class BondOrder(IntEnum):
    """Bond order enumeration.

    ``UNSPECIFIED`` is the order of a bond written without an order symbol.
    It resolves to single, or to aromatic between two aromatic atoms.
    """

    UNSPECIFIED = 0
    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    AROMATIC = 4
    QUADRUPLE = 5

    def __str__(self) -> str:
        return self.name.lower()


class BondDirection(Enum):
    """Cis/trans marker on a bond adjacent to a double bond."""

    UP = "/"
    DOWN = "\\"

    def __str__(self) -> str:
        return self.value


class ChiralClass(Enum):
    """Chirality classes with their token and highest permutation number.

    The two shorthand forms ``@`` and ``@@`` take no number.
    """

    ANTICLOCKWISE = ("@", 0)
    CLOCKWISE = ("@@", 0)
    TETRAHEDRAL = ("TH", 2)
    ALLENAL = ("AL", 2)
    SQUARE_PLANAR = ("SP", 3)
    TRIGONAL_BIPYRAMIDAL = ("TB", 20)
    OCTAHEDRAL = ("OH", 30)

    def __init__(self, tag: str, max_number: int) -> None:
        self.tag = tag
        self.max_number = max_number

    @property
    def is_shorthand(self) -> bool:
        return self.max_number == 0

    @classmethod
    def from_tag(cls, tag: str) -> "ChiralClass | None":
        """Look up a numbered class by its two-letter tag (``TH``, ``OH``...)."""
        return _CHIRAL_TAGS.get(tag)


_CHIRAL_TAGS: Final[dict[str, ChiralClass]] = {
    c.tag: c for c in ChiralClass if not c.is_shorthand
}


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.

    Attributes:
        atomic_number: Atomic number (proton count), 0 for the wildcard.
        symbol: Element symbol (e.g., "C", "Cl", "*").
        name: Full element name.
    """

    atomic_number: int
    symbol: str
    name: str

    # Class-level registry
    _by_symbol: ClassVar[dict[str, "Element"]] = {}
    _by_number: ClassVar[dict[int, "Element"]] = {}

    def __post_init__(self) -> None:
        Element._by_symbol[self.symbol] = self
        Element._by_number[self.atomic_number] = self

    @property
    def is_wildcard(self) -> bool:
        return self.atomic_number == 0

    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by its exact, case-sensitive symbol."""
        return cls._by_symbol.get(symbol)

    @classmethod
    def from_aromatic_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by a lowercase aromatic symbol ("c", "se")."""
        if not is_aromatic_symbol(symbol):
            return None
        return cls._by_symbol.get(symbol.capitalize())

    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number."""
        return cls._by_number.get(num)


_ELEMENTS_DATA: Final[list[tuple[int, str, str]]] = [
    # (atomic_number, symbol, name)
    (0, "*", "Wildcard"),
    (1, "H", "Hydrogen"),
    (2, "He", "Helium"),
    (3, "Li", "Lithium"),
    (4, "Be", "Beryllium"),
    (5, "B", "Boron"),
    (6, "C", "Carbon"),
    (7, "N", "Nitrogen"),
    (8, "O", "Oxygen"),
    (9, "F", "Fluorine"),
    (10, "Ne", "Neon"),
    (11, "Na", "Sodium"),
    (12, "Mg", "Magnesium"),
    (13, "Al", "Aluminum"),
    (14, "Si", "Silicon"),
    (15, "P", "Phosphorus"),
    (16, "S", "Sulfur"),
    (17, "Cl", "Chlorine"),
    (18, "Ar", "Argon"),
    (19, "K", "Potassium"),
    (20, "Ca", "Calcium"),
    (21, "Sc", "Scandium"),
    (22, "Ti", "Titanium"),
    (23, "V", "Vanadium"),
    (24, "Cr", "Chromium"),
    (25, "Mn", "Manganese"),
    (26, "Fe", "Iron"),
    (27, "Co", "Cobalt"),
    (28, "Ni", "Nickel"),
    (29, "Cu", "Copper"),
    (30, "Zn", "Zinc"),
    (31, "Ga", "Gallium"),
    (32, "Ge", "Germanium"),
    (33, "As", "Arsenic"),
    (34, "Se", "Selenium"),
    (35, "Br", "Bromine"),
    (36, "Kr", "Krypton"),
    (37, "Rb", "Rubidium"),
    (38, "Sr", "Strontium"),
    (39, "Y", "Yttrium"),
    (40, "Zr", "Zirconium"),
    (41, "Nb", "Niobium"),
    (42, "Mo", "Molybdenum"),
    (43, "Tc", "Technetium"),
    (44, "Ru", "Ruthenium"),
    (45, "Rh", "Rhodium"),
    (46, "Pd", "Palladium"),
    (47, "Ag", "Silver"),
    (48, "Cd", "Cadmium"),
    (49, "In", "Indium"),
    (50, "Sn", "Tin"),
    (51, "Sb", "Antimony"),
    (52, "Te", "Tellurium"),
    (53, "I", "Iodine"),
    (54, "Xe", "Xenon"),
    (55, "Cs", "Cesium"),
    (56, "Ba", "Barium"),
    (57, "La", "Lanthanum"),
    (58, "Ce", "Cerium"),
    (59, "Pr", "Praseodymium"),
    (60, "Nd", "Neodymium"),
    (61, "Pm", "Promethium"),
    (62, "Sm", "Samarium"),
    (63, "Eu", "Europium"),
    (64, "Gd", "Gadolinium"),
    (65, "Tb", "Terbium"),
    (66, "Dy", "Dysprosium"),
    (67, "Ho", "Holmium"),
    (68, "Er", "Erbium"),
    (69, "Tm", "Thulium"),
    (70, "Yb", "Ytterbium"),
    (71, "Lu", "Lutetium"),
    (72, "Hf", "Hafnium"),
    (73, "Ta", "Tantalum"),
    (74, "W", "Tungsten"),
    (75, "Re", "Rhenium"),
    (76, "Os", "Osmium"),
    (77, "Ir", "Iridium"),
    (78, "Pt", "Platinum"),
    (79, "Au", "Gold"),
    (80, "Hg", "Mercury"),
    (81, "Tl", "Thallium"),
    (82, "Pb", "Lead"),
    (83, "Bi", "Bismuth"),
    (84, "Po", "Polonium"),
    (85, "At", "Astatine"),
    (86, "Rn", "Radon"),
    (87, "Fr", "Francium"),
    (88, "Ra", "Radium"),
    (89, "Ac", "Actinium"),
    (90, "Th", "Thorium"),
    (91, "Pa", "Protactinium"),
    (92, "U", "Uranium"),
    (93, "Np", "Neptunium"),
    (94, "Pu", "Plutonium"),
    (95, "Am", "Americium"),
    (96, "Cm", "Curium"),
    (97, "Bk", "Berkelium"),
    (98, "Cf", "Californium"),
    (99, "Es", "Einsteinium"),
    (100, "Fm", "Fermium"),
    (101, "Md", "Mendelevium"),
    (102, "No", "Nobelium"),
    (103, "Lr", "Lawrencium"),
    (104, "Rf", "Rutherfordium"),
    (105, "Db", "Dubnium"),
    (106, "Sg", "Seaborgium"),
    (107, "Bh", "Bohrium"),
    (108, "Hs", "Hassium"),
    (109, "Mt", "Meitnerium"),
    (110, "Ds", "Darmstadtium"),
    (111, "Rg", "Roentgenium"),
    (112, "Cn", "Copernicium"),
    (113, "Nh", "Nihonium"),
    (114, "Fl", "Flerovium"),
    (115, "Mc", "Moscovium"),
    (116, "Lv", "Livermorium"),
    (117, "Ts", "Tennessine"),
    (118, "Og", "Oganesson"),
]

ELEMENTS: Final[tuple[Element, ...]] = tuple(
    Element(num, sym, name) for num, sym, name in _ELEMENTS_DATA
)

WILDCARD: Final[Element] = ELEMENTS[0]

# Elements that may be written without brackets
ORGANIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "B", "C", "N", "O", "P", "S", "F", "Cl", "Br", "I",
})

# Lowercase forms allowed without brackets
AROMATIC_ORGANIC_SUBSET: Final[FrozenSet[str]] = frozenset({
    "b", "c", "n", "o", "p", "s",
})

# Lowercase forms allowed inside brackets
AROMATIC_SUBSET: Final[FrozenSet[str]] = AROMATIC_ORGANIC_SUBSET | {"as", "se"}

# Two-letter organic symbols, matched before their one-letter prefixes
TWO_LETTER_ORGANIC: Final[FrozenSet[str]] = frozenset({"Cl", "Br"})


def is_organic_symbol(symbol: str) -> bool:
    """Check if symbol can be written without brackets."""
    return symbol in ORGANIC_SUBSET or symbol in AROMATIC_ORGANIC_SUBSET


def is_aromatic_symbol(symbol: str) -> bool:
    """Check if symbol represents an aromatic atom."""
    return symbol in AROMATIC_SUBSET
