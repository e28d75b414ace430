"""Clausal form and Horn classification.

A CNF matrix, as computed by :func:`.bnf.to_cnf`, is split into a list of
clauses, and each clause into a tuple of literals. Both orders are the
left-to-right orders in the matrix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from .atomic import AtomicFormula, Eq, Ne, Pred, term_as_str
from .boolean import And, Not, Or
from .formula import Formula


class InvariantViolation(Exception):
    """A formula that should be in CNF is not. This indicates a bug in the
    computation of the input rather than an input error by the user.
    """
    pass


@dataclass(frozen=True)
class Literal:
    """An atomic formula together with a negation flag. A literal is positive
    if and only if it is not negated. In particular, ``Ne(s, t)`` is a positive
    literal.

    >>> from folnf.firstorder import Variable, function_app
    >>> x, y = Variable('x'), Variable('y')
    >>> print(Literal(Pred('P', [x, function_app('f', [y])]), negated=True))
    ~P(x,f(y))
    >>> print(Literal(Ne(x, y)))
    (x≠y)
    """

    atom: AtomicFormula
    negated: bool = False

    @property
    def is_positive(self) -> bool:
        return not self.negated

    def __str__(self) -> str:
        return f'~{self.atom_as_str()}' if self.negated else self.atom_as_str()

    def as_latex(self) -> str:
        return f'\\lnot {self.atom_as_str()}' if self.negated else self.atom_as_str()

    def atom_as_str(self) -> str:
        match self.atom:
            case Pred(name=name, terms=terms):
                if not terms:
                    return name
                return f'{name}({",".join(term_as_str(t, sep=",") for t in terms)})'
            case Eq(lhs=lhs, rhs=rhs):
                return f'({term_as_str(lhs, sep=",")}={term_as_str(rhs, sep=",")})'
            case Ne(lhs=lhs, rhs=rhs):
                return f'({term_as_str(lhs, sep=",")}≠{term_as_str(rhs, sep=",")})'
            case _:
                assert False, type(self.atom)


Clause: TypeAlias = tuple[Literal, ...]
"""A disjunction of literals.
"""

ClauseSet: TypeAlias = list[Clause]
"""A conjunction of clauses.
"""


class ClauseExtraction:
    r"""Extract the clause set from a CNF matrix.

    >>> from folnf import parse
    >>> for clause in clauses_from_cnf(parse(r'(\neg P(x) \lor Q(x)) \land x = c')):
    ...     print(', '.join(str(lit) for lit in clause))
    ~P(x), Q(x)
    (x=c)

    Anything else than a literal below the toplevel :class:`And` and
    :class:`Or` nodes violates the CNF:

    >>> clauses_from_cnf(parse(r'P \lor (Q \land R)'))
    Traceback (most recent call last):
    ...
    folnf.firstorder.clauses.InvariantViolation: not a literal: And(Q, R)
    """

    def __call__(self, f: Formula) -> ClauseSet:
        return list(self.clauses(f))

    def clauses(self, f: Formula):
        match f:
            case And(lhs=lhs, rhs=rhs):
                yield from self.clauses(lhs)
                yield from self.clauses(rhs)
            case _:
                yield tuple(self.literals(f))

    def literals(self, f: Formula):
        match f:
            case Or(lhs=lhs, rhs=rhs):
                yield from self.literals(lhs)
                yield from self.literals(rhs)
            case Not(arg=Pred() | Eq() | Ne() as atom):
                yield Literal(atom, negated=True)
            case Pred() | Eq() | Ne():
                yield Literal(f)
            case _:
                raise InvariantViolation(f'not a literal: {f!r}')


clauses_from_cnf = ClauseExtraction()
"""User interface for the extraction of clauses.
"""


@dataclass
class HornReport:
    """The result of :func:`horn_report`. The violating indices are 1-based.
    """

    is_horn: bool
    violating_indices: list[int] = field(default_factory=list)


def horn_report(clauses: ClauseSet) -> HornReport:
    """A clause set is Horn if each clause contains at most one positive
    literal. Report all clauses violating this.

    >>> from folnf.firstorder import Pred
    >>> P, Q, R = Pred('P'), Pred('Q'), Pred('R')
    >>> horn_report([(Literal(P), Literal(Q)), (Literal(R, negated=True),)])
    HornReport(is_horn=False, violating_indices=[1])
    """
    violating = [i for i, clause in enumerate(clauses, start=1)
                 if sum(lit.is_positive for lit in clause) > 1]
    return HornReport(is_horn=not violating, violating_indices=violating)


def clauses_to_display(clauses: ClauseSet) -> str:
    r"""LaTeX display of a clause set as numbered lines.

    >>> from folnf import parse
    >>> print(clauses_to_display(clauses_from_cnf(parse(r'(\neg P(x) \lor Q(x)) \land R'))))
    1.\;\{ \lnot P(x) \lor Q(x) \} \\ 2.\;\{ R \}
    """
    lines = []
    for i, clause in enumerate(clauses, start=1):
        literals = ' \\lor '.join(lit.as_latex() for lit in clause)
        lines.append(f'{i}.\\;\\{{ {literals} \\}}')
    return ' \\\\ '.join(lines)
