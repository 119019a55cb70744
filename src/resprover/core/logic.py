"""Propositional clause model.

Propositions are positive integers, literals pair a proposition with a
polarity, and clauses are immutable sets of literals. All objects are
hashable so clause collections can be plain Python sets.
"""

from typing import FrozenSet, Iterable, Iterator, Optional, Tuple


Proposition = int


class Literal:
    """A proposition together with its polarity (True = positive)."""

    __slots__ = ('proposition', 'polarity', '_hash')

    @staticmethod
    def check(proposition, polarity):
        if not isinstance(proposition, int) or isinstance(proposition, bool):
            raise TypeError(f"Expected int proposition, got {proposition!r}")
        if proposition <= 0:
            raise ValueError(f"Propositions must be positive, got {proposition}")
        if not isinstance(polarity, bool):
            raise TypeError(f"Expected bool, got {polarity!r}")

    def __init__(self, proposition: Proposition, polarity: bool = True):
        Literal.check(proposition, polarity)
        self.proposition = proposition
        self.polarity = polarity
        self._hash = hash((proposition, polarity))

    @classmethod
    def from_int(cls, value: int) -> 'Literal':
        """Build a literal from a signed DIMACS integer."""
        if value == 0:
            raise ValueError("0 is not a literal")
        return cls(abs(value), value > 0)

    def to_int(self) -> int:
        return self.proposition if self.polarity else -self.proposition

    def complement(self) -> 'Literal':
        return Literal(self.proposition, not self.polarity)

    def sort_key(self) -> Tuple[int, bool]:
        return (self.proposition, self.polarity)

    def __eq__(self, other):
        if not isinstance(other, Literal):
            return False
        return self.proposition == other.proposition and \
            self.polarity == other.polarity

    def __hash__(self):
        return self._hash

    def __lt__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self):
        return f"{'' if self.polarity else '~'}p{self.proposition}"


class Clause:
    """An immutable, duplicate-free disjunction of literals.

    The empty clause denotes a derived contradiction. Clauses holding a
    literal and its complement (tautologies) are representable and are not
    filtered out anywhere in the search.
    """

    __slots__ = ('literals', '_hash', '_key')

    @staticmethod
    def check(literals):
        for literal in literals:
            if not isinstance(literal, Literal):
                raise TypeError(f"Expected Literal, got {literal!r}")

    def __init__(self, *literals: Literal):
        Clause.check(literals)
        self.literals: FrozenSet[Literal] = frozenset(literals)
        self._hash = hash(self.literals)
        self._key = None

    @classmethod
    def from_ints(cls, values: Iterable[int]) -> 'Clause':
        return cls(*(Literal.from_int(v) for v in values))

    @property
    def is_empty(self) -> bool:
        return not self.literals

    @property
    def is_unit(self) -> bool:
        return len(self.literals) == 1

    def is_tautology(self) -> bool:
        return any(lit.complement() in self.literals for lit in self.literals
                   if lit.polarity)

    def contains(self, literal: Literal) -> bool:
        return literal in self.literals

    def propositions(self) -> FrozenSet[Proposition]:
        return frozenset(lit.proposition for lit in self.literals)

    def sort_key(self) -> Tuple[Tuple[int, bool], ...]:
        """Key of the canonical clause order (sorted literal tuples)."""
        if self._key is None:
            self._key = tuple(sorted(lit.sort_key() for lit in self.literals))
        return self._key

    def to_ints(self):
        return [lit.to_int() for lit in sorted(self.literals)]

    def __len__(self):
        return len(self.literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __contains__(self, literal):
        return literal in self.literals

    def __eq__(self, other):
        if not isinstance(other, Clause):
            return False
        return self.literals == other.literals

    def __hash__(self):
        return self._hash

    def __lt__(self, other):
        if not isinstance(other, Clause):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self):
        if not self.literals:
            return "[]"
        return ' | '.join(map(repr, sorted(self.literals)))


EMPTY_CLAUSE = Clause()


class Problem:
    """A clause collection together with the counts its source declared."""

    @staticmethod
    def check(clauses):
        for clause in clauses:
            if not isinstance(clause, Clause):
                raise TypeError(f"Expected Clause, got {clause!r}")

    def __init__(self, *clauses: Clause,
                 num_propositions: Optional[int] = None,
                 name: Optional[str] = None):
        Problem.check(clauses)
        self.clauses: FrozenSet[Clause] = frozenset(clauses)
        self.name = name
        if num_propositions is None:
            num_propositions = max(
                (max(c.propositions()) for c in self.clauses if c.literals),
                default=0)
        self.num_propositions = num_propositions

    def __len__(self):
        return len(self.clauses)

    def __repr__(self):
        return '\n'.join(map(repr, sorted(self.clauses)))

    def propositions(self) -> FrozenSet[Proposition]:
        result = set()
        for clause in self.clauses:
            result |= clause.propositions()
        return frozenset(result)

    def is_satisfied_by(self, assignment) -> bool:
        """Evaluate the clause set under a proposition -> bool mapping."""
        return all(
            any(assignment.get(lit.proposition, False) == lit.polarity
                for lit in clause)
            for clause in self.clauses
        )
