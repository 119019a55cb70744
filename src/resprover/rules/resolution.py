"""Propositional binary resolution."""

from enum import Enum

from resprover.core.logic import Clause, Literal, EMPTY_CLAUSE


class ResolutionMode(Enum):
    """How resolvents of clauses with several complementary pairs are built.

    UNION keeps every remaining literal, so a resolvent may be a tautology.
    CANCEL answers the empty clause as soon as another complementary pair
    exists and drops literals of the second parent whose complement occurs
    in the first one, and the second parent's own copy of the resolved
    literal. CANCEL is unsound: {p, q} and {~p, ~q} resolve to the
    empty clause although they are jointly satisfiable.
    """
    UNION = "union"
    CANCEL = "cancel"


DEFAULT_RESOLUTION_MODE = ResolutionMode.UNION


def resolve(clause_a: Clause, clause_b: Clause, literal: Literal,
            mode: ResolutionMode = DEFAULT_RESOLUTION_MODE) -> Clause:
    """Resolve two clauses on a literal of the first one.

    Args:
        clause_a: Clause containing ``literal``
        clause_b: Clause containing the complement of ``literal``
        literal: Literal resolved upon
        mode: Treatment of additional complementary pairs

    Returns:
        The resolvent clause

    Raises:
        ValueError: If ``literal`` is not in ``clause_a`` or its complement
            is not in ``clause_b``
    """
    if literal not in clause_a:
        raise ValueError(f"{literal} does not occur in {clause_a}")
    complement = literal.complement()
    if complement not in clause_b:
        raise ValueError(f"{complement} does not occur in {clause_b}")

    if mode is ResolutionMode.UNION:
        return Clause(*((clause_a.literals - {literal}) |
                        (clause_b.literals - {complement})))

    literals = set()
    for lit in clause_a:
        if lit == literal:
            continue
        if lit.complement() in clause_b:
            return EMPTY_CLAUSE
        literals.add(lit)
    for lit in clause_b:
        if lit != literal and lit.complement() not in clause_a:
            literals.add(lit)
    return Clause(*literals)

