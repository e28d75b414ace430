"""Boolean normal forms of quantifier-free matrices by structural
distribution.

The computation is purely syntactic. There is no simplification: duplicate
literals, complementary literals, and subsumed clauses or cubes remain in
place. Literals are neither introduced nor removed, only the nesting of
:class:`And` and :class:`Or` changes. The size of the result can be
exponential in the size of the input.
"""

from __future__ import annotations

from .atomic import AtomicFormula
from .boolean import And, Not, Or
from .formula import Formula


class BooleanNormalForm:
    """Disjunctive normal form computation, or conjunctive normal form
    computation with `dualize=True`.

    The input must be quantifier-free and in negation normal form, as are the
    matrices produced by :func:`.pnf.to_prenex`.
    """

    def __init__(self, dualize: bool = False) -> None:
        # For DNF, the inner operator And is distributed over the outer
        # operator Or. For CNF, it is the other way round.
        self.outer: type[And | Or] = And if dualize else Or
        self.inner: type[And | Or] = self.outer.dual()

    def __call__(self, f: Formula) -> Formula:
        match f:
            case And(lhs=lhs, rhs=rhs) | Or(lhs=lhs, rhs=rhs):
                if f.op is self.outer:
                    return self.outer(self(lhs), self(rhs))
                return self.distribute(self(lhs), self(rhs))
            case Not(arg=AtomicFormula()) | AtomicFormula():
                return f
            case _:
                raise ValueError(f'{f!r} is not a quantifier-free NNF')

    def distribute(self, lhs: Formula, rhs: Formula) -> Formula:
        """Combine `lhs` and `rhs`, which are both in normal form already,
        with the inner operator. An outer operator on the right hand side is
        split first, then one on the left hand side.
        """
        if isinstance(rhs, self.outer):
            return self.outer(self.distribute(lhs, rhs.lhs), self.distribute(lhs, rhs.rhs))
        if isinstance(lhs, self.outer):
            return self.outer(self.distribute(lhs.lhs, rhs), self.distribute(lhs.rhs, rhs))
        return self.inner(lhs, rhs)


to_dnf = BooleanNormalForm()
r"""User interface for the computation of a disjunctive normal form.

>>> from folnf import parse
>>> to_dnf(parse(r'(P \lor Q) \land (R \lor S)'))
Or(Or(And(P, R), And(Q, R)), Or(And(P, S), And(Q, S)))
"""

to_cnf = BooleanNormalForm(dualize=True)
r"""User interface for the computation of a conjunctive normal form.

>>> from folnf import parse
>>> to_cnf(parse(r'P \lor (Q \land \neg R)'))
And(Or(P, Q), Or(P, Not(R)))
>>> to_cnf(parse(r'(P \land Q) \lor (R \land S)'))
And(And(Or(P, R), Or(Q, R)), And(Or(P, S), Or(Q, S)))
"""
