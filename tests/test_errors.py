"""Tests for parse errors: their kinds and the offsets they report."""

import pytest

from smiles_parser import (
    BranchError,
    ChemError,
    DisconnectionError,
    ParseError,
    RingError,
    UnknownElementError,
    is_valid_smiles,
    parse,
)


class TestHierarchy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("cls", [UnknownElementError, RingError, BranchError, DisconnectionError])
    def test_subclasses(self, cls):
        assert issubclass(cls, ParseError)
        assert issubclass(cls, ChemError)

    def test_message_with_caret(self):
        with pytest.raises(BranchError) as excinfo:
            parse("CC)C")
        assert str(excinfo.value) == "Unmatched ')': no open branch\n  CC)C\n    ^"

    def test_message_without_position(self):
        err = ParseError("bad", "CC")
        assert str(err) == "bad in: CC"
        assert str(ParseError("bad")) == "bad"

    def test_unknown_element_sets_found(self):
        err = UnknownElementError("nope", "[Xx]", 1, symbol="Xx")
        assert err.symbol == "Xx"
        assert err.found == "Xx"


def assert_error(smiles, cls, position):
    with pytest.raises(cls) as excinfo:
        parse(smiles)
    assert excinfo.value.position == position
    assert excinfo.value.smiles == smiles
    return excinfo.value


class TestBranchErrors:
    """Unmatched parentheses."""

    @pytest.mark.parametrize("smiles,position", [
        ("CC)C", 2),
        ("CC(C", 2),
        ("C(C(C", 3),
        ("C(C)(", 4),
        ("C(C))", 4),
        ("CC(C)C)", 6),
        ("(C)", 0),
    ])
    def test_unmatched(self, smiles, position):
        assert_error(smiles, BranchError, position)

    @pytest.mark.parametrize("smiles,position", [
        ("C()", 2),
        ("C((C))", 2),
        ("C(.)C", 3),
        ("C(=)C", 3),
    ])
    def test_malformed_branch(self, smiles, position):
        err = assert_error(smiles, ParseError, position)
        assert not isinstance(err, BranchError)


class TestRingErrors:
    """Ring-closure failures."""

    def test_unclosed(self):
        err = assert_error("C1CC", RingError, 1)
        assert err.ring_index == 1

    def test_unclosed_percent(self):
        err = assert_error("CC%42CC", RingError, 2)
        assert err.ring_index == 42

    def test_duplicate_open_on_one_atom(self):
        assert_error("C11CC", RingError, 2)

    def test_mismatched_bond_symbols(self):
        err = assert_error("C=1CCCCC#1", RingError, 8)
        assert err.expected == "="
        assert err.found == "#"

    @pytest.mark.parametrize("smiles,position", [
        ("C1C1", 3),
        ("C12CCCCC12", 9),
    ])
    def test_duplicate_bond(self, smiles, position):
        """A ring closure may not repeat an existing bond."""
        assert_error(smiles, RingError, position)

    @pytest.mark.parametrize("smiles,position", [("C%1", 1), ("C%", 1), ("C%1C", 1)])
    def test_bad_percent_label(self, smiles, position):
        assert_error(smiles, ParseError, position)


class TestDisconnectionErrors:
    """Misplaced '.'."""

    @pytest.mark.parametrize("smiles", ["C.=C", "C.1", "C.-1C", "C./C"])
    def test_bond_or_label_after_dot(self, smiles):
        assert_error(smiles, DisconnectionError, 2)

    @pytest.mark.parametrize("smiles,position", [
        (".C", 0),
        ("C.", 2),
        ("C..C", 2),
        ("C.(C)", 2),
        ("C.)", 2),
    ])
    def test_dot_needs_atoms(self, smiles, position):
        err = assert_error(smiles, ParseError, position)
        assert not isinstance(err, DisconnectionError)


class TestSyntaxErrors:
    """General syntax errors."""

    @pytest.mark.parametrize("smiles,position", [
        ("C=", 2),
        ("C=.C", 2),
        ("C=)", 2),
        ("C=(C)", 2),
        ("C==C", 2),
        ("=C", 0),
        ("1C", 0),
        ("C C", 1),
        ("C\tC", 1),
        ("C}", 1),
        ("[CH4", 4),
    ])
    def test_offsets(self, smiles, position):
        assert_error(smiles, ParseError, position)

    def test_trailing_bond_reports_end(self):
        err = assert_error("CC#", ParseError, 3)
        assert err.found is None

    def test_found_character(self):
        err = assert_error("C C", ParseError, 1)
        assert err.found == " "

    def test_non_ascii(self):
        err = assert_error("CCé", ParseError, 2)
        assert err.found == "é"

    def test_non_ascii_bytes(self):
        with pytest.raises(ParseError) as excinfo:
            parse(b"C\xffC")
        assert excinfo.value.position == 1


class TestElementErrors:
    """Unknown or bracket-only element symbols."""

    @pytest.mark.parametrize("smiles,symbol,position", [
        ("[Xx]", "Xx", 1),
        ("X", "X", 0),
        ("CX", "X", 1),
        ("Na", "Na", 0),
        ("CCFe", "Fe", 2),
        ("Cx", "x", 1),
    ])
    def test_unknown(self, smiles, symbol, position):
        err = assert_error(smiles, UnknownElementError, position)
        assert err.symbol == symbol

    def test_bracket_suggestion(self):
        with pytest.raises(UnknownElementError, match=r"\[Na\]"):
            parse("Na")


class TestIsValidSmiles:
    """is_valid_smiles() swallows only chemistry errors."""

    @pytest.mark.parametrize("smiles", ["C", "", "c1ccccc1", "[Na+].[Cl-]", "C1.C1"])
    def test_valid(self, smiles):
        assert is_valid_smiles(smiles)

    @pytest.mark.parametrize("smiles", ["C1CC", "CC)", "C.=C", "[Xx]", "C=", "CCé"])
    def test_invalid(self, smiles):
        assert not is_valid_smiles(smiles)

    def test_type_error_propagates(self):
        with pytest.raises(TypeError):
            is_valid_smiles(None)
