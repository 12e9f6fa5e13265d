import argparse
import sys
from typing import List, Optional, TextIO

from minmodel.cnf_io import format_literals, read_dimacs
from minmodel.coordinator import DualFormulaCoordinator
from minmodel.core.config import MinModelConfig
from minmodel.core.errors import CNFError, MinModelError
from minmodel.verify import is_minimal

def build_config(args) -> MinModelConfig:
    config = MinModelConfig.from_env_or_file()
    updates = {}
    if args.solver:
        updates["solver_name"] = args.solver
    if args.conf_budget is not None:
        updates["conf_budget"] = args.conf_budget
    if args.prop_budget is not None:
        updates["prop_budget"] = args.prop_budget
    if updates:
        config = MinModelConfig.build({**config.model_dump(), **updates})
    return config

def handle_solve(args, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    doc = read_dimacs(args.cnf_file)
    clauses = [list(c) for c in doc.clauses]
    with DualFormulaCoordinator(build_config(args), doc.clauses) as coord:
        found = 0
        while args.count is None or found < args.count:
            model = coord.find_minimal_model()
            if model is None:
                print("unsat", file=out)
                break
            found += 1
            print(f"full model: {format_literals(model.full_model)}", file=out)
            print(f"reduced model: {format_literals(model.literals)}", file=out)
            if args.verify and not is_minimal(clauses, model.literals):
                print("verification failed: model is not minimal", file=out)
                return 1
            clauses.append(coord.block(model))
    return 0

def parse_line(line: str, lineno: int) -> List[int]:
    clause = []
    for tok in line.split():
        try:
            lit = int(tok)
        except ValueError:
            raise CNFError(f"Line {lineno}: invalid literal {tok!r}")
        if lit == 0:
            break
        clause.append(lit)
    return clause

def run_interactive(inp: TextIO, out: TextIO, config: Optional[MinModelConfig] = None) -> int:
    """
    Reads clauses line by line. An empty clause requests a minimal model,
    which is printed and then blocked. Stops once the formula is UNSAT.
    """
    with DualFormulaCoordinator(config) as coord:
        for lineno, line in enumerate(inp, start=1):
            clause = parse_line(line, lineno)
            if clause:
                coord.add_clause(clause)
                continue

            model = coord.find_minimal_model()
            if model is None:
                print("unsat", file=out)
                break
            print(f"full model: {format_literals(model.full_model)}", file=out)
            print(f"reduced model: {format_literals(model.literals)}", file=out)
            print("blocking reduced model", file=out)
            coord.block(model)
            out.flush()
    return 0

def handle_interactive(args) -> int:
    return run_interactive(sys.stdin, sys.stdout, build_config(args))

def non_negative_int(value: str) -> int:
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"expected a count >= 0, got {value}")
    return count

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Minimal models of CNF formulas")
    parser.add_argument("--solver", help="PySAT solver name (default: g3)")
    parser.add_argument("--conf-budget", type=int, help="Conflict budget per query")
    parser.add_argument("--prop-budget", type=int, help="Propagation budget per query")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_solve = subparsers.add_parser("solve", help="Find and block minimal models of a DIMACS file")
    p_solve.add_argument("cnf_file", help="Path to DIMACS CNF file")
    p_solve.add_argument("--count", type=non_negative_int, default=1, help="Number of models (0 = until UNSAT)")
    p_solve.add_argument("--verify", action="store_true", help="Check each model for minimality")
    p_solve.set_defaults(func=handle_solve)

    p_inter = subparsers.add_parser("interactive", help="Read clauses from stdin; empty line solves")
    p_inter.set_defaults(func=handle_interactive)

    args = parser.parse_args(argv)
    if getattr(args, "count", None) == 0:
        args.count = None

    try:
        return args.func(args)
    except MinModelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
