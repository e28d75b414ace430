"""Skolemization of prenex formulas given as a quantifier prefix and a
quantifier-free matrix.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .atomic import function_app, Pred, Term, Variable
from .formula import Formula
from .quantified import All, Ex, Prefix


@dataclass
class SkolemResult:
    """The result of a Skolemization.
    """

    matrix: Formula
    """The Skolemized matrix. Universal variables remain free and are
    implicitly universally quantified.
    """

    mapping: list[tuple[Variable, Term]] = field(default_factory=list)
    """The witness terms substituted for the existential variables, in prefix
    order.
    """

    universals: list[Variable] = field(default_factory=list)
    """The universal variables in prefix order.
    """


class Skolemization:
    """Replace existentially quantified variables by Skolem terms.

    The prefix is processed from left to right. An existential variable
    without universal variables to its left is replaced by a new constant
    ``sk_c<n>``. Otherwise it is replaced by an application of a new function
    ``sk_f<n>`` to all universal variables to its left, in prefix order.
    Constants and functions are counted separately, starting at 1. Names
    already used in the input, as variables, functions, or predicates, are
    skipped.

    >>> from folnf import parse, to_prenex
    >>> result = skolemize(*to_prenex(parse(r'\\forall x \\exists y. P(x, y)')))
    >>> result.matrix
    P(x, sk_f1(x))
    >>> result.mapping
    [(y, sk_f1(x))]
    >>> result.universals
    [x]
    """

    def __call__(self, prefix: Prefix, matrix: Formula) -> SkolemResult:
        used = set(matrix.names())
        used.update(v.name for _, v in prefix)
        used.update(atom.name for atom in matrix.atoms() if isinstance(atom, Pred))
        result = SkolemResult(matrix)
        n_constants = 0
        n_functions = 0
        for q, v in prefix:
            if q is All:
                result.universals.append(v)
                continue
            assert q is Ex, q
            if result.universals:
                n_functions, name = self.fresh_name('sk_f', n_functions, used)
                witness = function_app(name, result.universals)
            else:
                n_constants, name = self.fresh_name('sk_c', n_constants, used)
                witness = Variable(name)
            result.mapping.append((v, witness))
            result.matrix = result.matrix.subs({v: witness})
        return result

    @staticmethod
    def fresh_name(stem: str, counter: int, used: set[str]) -> tuple[int, str]:
        """Increment `counter` until ``stem + str(counter)`` is not in `used`.
        Return the new counter together with that name.

        >>> Skolemization.fresh_name('sk_c', 0, {'sk_c1', 'sk_c2'})
        (3, 'sk_c3')
        """
        while True:
            counter += 1
            name = f'{stem}{counter}'
            if name not in used:
                used.add(name)
                return counter, name


skolemize = Skolemization()
"""User interface for Skolemization.
"""
