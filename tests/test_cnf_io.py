import pytest
from minmodel.cnf_io import parse_dimacs, read_dimacs
from minmodel.core.errors import CNFError

def test_parse_with_header_and_comments():
    doc = parse_dimacs("c example\np cnf 5 2\n1 -2 0\n3 0\n")
    assert doc.num_vars == 5
    assert doc.clauses == [[1, -2], [3]]

def test_clause_spanning_lines_and_missing_terminator():
    doc = parse_dimacs("1 2\n-3 0 4\n")
    assert doc.clauses == [[1, 2, -3], [4]]
    assert doc.num_vars == 4

def test_explicit_empty_clause():
    doc = parse_dimacs("1 0\n0\n")
    assert doc.clauses == [[1], []]

def test_satlib_end_marker():
    doc = parse_dimacs("p cnf 2 1\n1 2 0\n%\n0\n")
    assert doc.clauses == [[1, 2]]

def test_invalid_literal():
    with pytest.raises(CNFError):
        parse_dimacs("1 x 0\n")

def test_invalid_header():
    with pytest.raises(CNFError):
        parse_dimacs("p dnf 2 1\n1 0\n")

def test_read_dimacs(tmp_path):
    path = tmp_path / "f.cnf"
    path.write_text("p cnf 2 2\n1 2 0\n-1 -2 0\n")
    assert read_dimacs(path).clauses == [[1, 2], [-1, -2]]
    with pytest.raises(CNFError):
        read_dimacs(tmp_path / "missing.cnf")
