from pathlib import Path
from typing import List, Union
from pydantic import BaseModel, Field

from minmodel.core.errors import CNFError

class CnfDocument(BaseModel):
    """A CNF formula as read from DIMACS."""
    num_vars: int = Field(ge=0)
    clauses: List[List[int]]

def parse_dimacs(text: str) -> CnfDocument:
    """
    Parses DIMACS CNF text. The `p cnf` header is optional; clauses are
    terminated by 0 and may span lines. A trailing clause without its
    terminating 0 is accepted.
    """
    clauses: List[List[int]] = []
    current: List[int] = []
    declared_vars = None
    max_var = 0

    for lineno, line in enumerate(text.splitlines(), start=1):
        s = line.strip()
        if s.startswith("%"):
            # SATLIB end marker
            break
        if not s or s.startswith("c"):
            continue
        if s.startswith("p"):
            parts = s.split()
            if len(parts) != 4 or parts[1] != "cnf":
                raise CNFError(f"Line {lineno}: malformed header {s!r}")
            try:
                declared_vars = int(parts[2])
            except ValueError:
                raise CNFError(f"Line {lineno}: malformed header {s!r}")
            continue
        for tok in s.split():
            try:
                lit = int(tok)
            except ValueError:
                raise CNFError(f"Line {lineno}: invalid literal {tok!r}")
            if lit == 0:
                clauses.append(current)
                current = []
            else:
                current.append(lit)
                max_var = max(max_var, abs(lit))

    if current:
        clauses.append(current)

    num_vars = max(max_var, declared_vars or 0)
    return CnfDocument(num_vars=num_vars, clauses=clauses)

def read_dimacs(path: Union[str, Path]) -> CnfDocument:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CNFError(f"Cannot read {path}: {e}")
    return parse_dimacs(text)

def format_literals(literals: List[int]) -> str:
    return " ".join(str(l) for l in literals)
