"""Standardize apart, i.e., rename bound variables such that each quantifier
has its own variable.
"""

from __future__ import annotations

import re

from .atomic import AtomicFormula, Variable
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import Formula
from .quantified import All, Ex


class StandardizeApart:
    """Convert to an equivalent formula with distinct variables.

    First all names in use are collected: every quantified variable and every
    symbol and function name occurring in a term, free or bound. The formula
    is then rebuilt top-down. Every quantifier gets a fresh variable, which
    is substituted for the old one within the scope of the quantifier. Free
    symbols are left alone.

    Afterwards each bound variable occurs with one and only one quantifier,
    and the set of bound variables is disjoint from the set of all other
    names. Fresh names are minted per call. There is no state shared between
    calls.

    >>> from folnf import parse
    >>> standardize_apart(parse(r'\\forall x P(x) \\land \\exists x (Q(x) \\lor R(x1))'))
    And(All(x2, P(x2)), Ex(x3, Or(Q(x3), R(x1))))
    """

    def __call__(self, f: Formula) -> Formula:
        used = set(f.names())
        return self.rename(f, {}, used)

    @staticmethod
    def fresh_name(name: str, used: set[str]) -> str:
        """Strip all non-letters from `name` and append the smallest positive
        integer for which the result is not in `used`. If no letters are left,
        the base is ``x``. The result is added to `used`.

        >>> used = {'x', 'x1', 'y'}
        >>> StandardizeApart.fresh_name('x', used)
        'x2'
        >>> StandardizeApart.fresh_name('y_0', used)
        'y1'
        >>> StandardizeApart.fresh_name('_7', used)
        'x3'
        >>> sorted(used)
        ['x', 'x1', 'x2', 'x3', 'y', 'y1']
        """
        base = re.sub('[^A-Za-z]', '', name) or 'x'
        i = 1
        while f'{base}{i}' in used:
            i += 1
        fresh = f'{base}{i}'
        used.add(fresh)  # mutable
        return fresh

    def rename(self, f: Formula, env: dict[Variable, Variable], used: set[str]) -> Formula:
        """Rebuild `f` top-down with the active renaming `env`.
        """
        match f:
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                new_var = Variable(self.fresh_name(var.name, used))
                return f.op(new_var, self.rename(arg, {**env, var: new_var}, used))
            case And() | Or() | Not() | Implies() | Equivalent():
                return f.op(*(self.rename(arg, env, used) for arg in f.args))
            case AtomicFormula():
                return f.subs(env)
            case _:
                assert False, type(f)


standardize_apart = StandardizeApart()
"""User interface for standardizing apart.
"""
