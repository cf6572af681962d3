"""
smiles_parser - Pure Python OpenSMILES parser.

A zero-dependency library that parses SMILES strings into validated,
immutable molecule graphs: atoms with their bracket properties, bonds with
order and cis/trans direction, resolved ring closures and connected
components.

    >>> from smiles_parser import parse
    >>> mol = parse("CC(=O)O")
    >>> [a.symbol for a in mol.atoms]
    ['C', 'C', 'O', 'O']
    >>> [str(mol.effective_order(b)) for b in mol.bonds]
    ['single', 'double', 'single']
"""

__version__ = "0.1.0"

# Core types
from smiles_parser.types import Atom, Bond, Chirality, Molecule

# Parsing
from smiles_parser.parser import SmilesParser, is_valid_smiles, parse

# Exceptions
from smiles_parser.exceptions import (
    BranchError,
    ChemError,
    DisconnectionError,
    ParseError,
    RingError,
    UnknownElementError,
)

# Element data
from smiles_parser.elements import (
    AROMATIC_SUBSET,
    ORGANIC_SUBSET,
    BondDirection,
    BondOrder,
    ChiralClass,
    Element,
)

__all__ = [
    # Types
    "Atom", "Bond", "Chirality", "Molecule",
    # Parsing
    "parse", "is_valid_smiles", "SmilesParser",
    # Exceptions
    "ChemError", "ParseError", "UnknownElementError", "RingError",
    "BranchError", "DisconnectionError",
    # Elements
    "Element", "BondOrder", "BondDirection", "ChiralClass",
    "ORGANIC_SUBSET", "AROMATIC_SUBSET",
]
