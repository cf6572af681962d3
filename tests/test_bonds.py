"""Tests for bond symbol parsing."""

import pytest

from smiles_parser import parse
from smiles_parser.bonds import BOND_SYMBOLS, BondSymbol, is_bond_symbol, parse_bond_symbol
from smiles_parser.elements import BondDirection, BondOrder
from smiles_parser.exceptions import ParseError
from smiles_parser.scanner import Scanner


class TestBondSymbol:
    """Test the symbol table."""

    @pytest.mark.parametrize("char,order,direction", [
        ("-", BondOrder.SINGLE, None),
        ("=", BondOrder.DOUBLE, None),
        ("#", BondOrder.TRIPLE, None),
        ("$", BondOrder.QUADRUPLE, None),
        (":", BondOrder.AROMATIC, None),
        ("/", BondOrder.UNSPECIFIED, BondDirection.UP),
        ("\\", BondOrder.UNSPECIFIED, BondDirection.DOWN),
    ])
    def test_symbol_table(self, char, order, direction):
        symbol = BOND_SYMBOLS[char]
        assert symbol.order == order
        assert symbol.direction == direction
        assert str(symbol) == char

    def test_is_bond_symbol(self):
        for char in "-=#$:/\\":
            assert is_bond_symbol(char)
        for char in ["C", "1", "(", ".", "%", None]:
            assert not is_bond_symbol(char)


class TestParseBondSymbol:
    """Test parse_bond_symbol()."""

    def test_implicit(self):
        """No symbol leaves the scanner in place."""
        scanner = Scanner("C")
        assert parse_bond_symbol(scanner) is None
        assert scanner.position == 0

    def test_consumes_one_char(self):
        scanner = Scanner("=C")
        assert parse_bond_symbol(scanner) is BondSymbol.DOUBLE
        assert scanner.position == 1

    def test_at_end(self):
        assert parse_bond_symbol(Scanner("")) is None

    @pytest.mark.parametrize("text", ["==C", "=#C", "/\\C", "-=C"])
    def test_consecutive_symbols(self, text):
        """Two bond symbols in a row are a syntax error at the second."""
        with pytest.raises(ParseError) as excinfo:
            parse_bond_symbol(Scanner(text))
        assert excinfo.value.position == 1
        assert excinfo.value.found == text[1]


class TestBondsInMolecule:
    """Test bond orders and directions after parsing."""

    def test_effective_order_resolution(self):
        """Implicit bonds are aromatic only between two aromatic atoms."""
        mol = parse("c1ccccc1C")
        ring = [b for b in mol.bonds if b.atom2_idx < 6]
        assert all(mol.effective_order(b) == BondOrder.AROMATIC for b in ring)
        methyl = mol.get_bond_between(5, 6)
        assert methyl.order == BondOrder.UNSPECIFIED
        assert mol.effective_order(methyl) == BondOrder.SINGLE

    def test_explicit_aromatic_between_aliphatic(self):
        mol = parse("C:C")
        assert mol.effective_order(mol.bonds[0]) == BondOrder.AROMATIC

    def test_direction_bonds_not_single(self):
        """Direction markers carry no order of their own."""
        mol = parse("F/C=C/F")
        first = mol.bonds[0]
        assert first.order == BondOrder.UNSPECIFIED
        assert first.direction is BondDirection.UP
        assert mol.effective_order(first) == BondOrder.SINGLE

    def test_bond_before_bracket_atom(self):
        mol = parse("C#[N+]")
        assert mol.bonds[0].order == BondOrder.TRIPLE

    def test_bond_into_branch(self):
        mol = parse("C(=O)(#N)")
        assert [b.order for b in mol.bonds] == [BondOrder.DOUBLE, BondOrder.TRIPLE]

    def test_is_explicit(self):
        mol = parse("CC-C/C")
        assert [b.is_explicit for b in mol.bonds] == [False, True, True]
