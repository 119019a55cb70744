"""DIMACS CNF file format handler.

Accepts the SATLIB flavour of the format: comment lines starting with
``c``, a ``p cnf <propositions> <clauses>`` header, clauses as signed
integers terminated by ``0``, and an optional trailer introduced by ``%``
which is ignored together with everything after it.
"""

from typing import List, Optional

from lark import Lark, Transformer, LarkError

from resprover.core.logic import Clause, Literal, Problem
from .base import FileFormat


dimacs_parser = Lark(r"""
    %import common.INT
    %import common.SIGNED_INT
    %import common.WS
    %ignore WS
    %ignore COMMENT_LINE
    %ignore TRAILER

    cnf_file : header literal*

    header : "p" "cnf" INT INT
    literal : SIGNED_INT

    COMMENT_LINE : /^c(?:[ \t\r][^\n]*)?$/m
    TRAILER : /%[\s\S]*/
""", start="cnf_file", parser="lalr")


class _CNFTransformer(Transformer):
    def header(self, children):
        return int(children[0]), int(children[1])

    def literal(self, children):
        return int(children[0])

    def cnf_file(self, children):
        return children[0], children[1:]


class DimacsFormat(FileFormat):
    """Handler for DIMACS CNF files."""

    def parse_string(self, content: str, name: Optional[str] = None) -> Problem:
        """Parse DIMACS text.

        Exactly the number of clauses declared in the header is read; a last
        clause missing its ``0`` terminator is accepted.

        Raises:
            ValueError: On syntax errors or too few clauses
        """
        try:
            tree = dimacs_parser.parse(content)
        except LarkError as e:
            raise ValueError(f"Invalid DIMACS input: {e}") from e
        (num_propositions, num_clauses), values = _CNFTransformer().transform(tree)

        clauses = []
        current = []
        for value in values:
            if len(clauses) == num_clauses:
                break
            if value == 0:
                clauses.append(Clause.from_ints(current))
                current = []
            else:
                current.append(value)
        if current and len(clauses) < num_clauses:
            clauses.append(Clause.from_ints(current))

        if len(clauses) < num_clauses:
            raise ValueError(
                f"Header declares {num_clauses} clauses, found {len(clauses)}")
        return Problem(*clauses, num_propositions=num_propositions, name=name)

    def format_problem(self, problem: Problem, comment: Optional[str] = None) -> str:
        lines = []
        if comment:
            lines.extend(f"c {line}" for line in comment.splitlines())
        lines.append(f"p cnf {problem.num_propositions} {len(problem.clauses)}")
        for clause in sorted(problem.clauses):
            lines.append(' '.join(map(str, clause.to_ints() + [0])))
        return '\n'.join(lines) + '\n'

    @property
    def name(self) -> str:
        return "dimacs"

    @property
    def extensions(self) -> List[str]:
        return ['.cnf', '.dimacs']


def read_string(content: str, name: Optional[str] = None) -> Problem:
    return DimacsFormat().parse_string(content, name=name)


def read_file(file_path) -> Problem:
    return DimacsFormat().parse_file(file_path)
