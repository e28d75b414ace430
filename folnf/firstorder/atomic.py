"""Terms and atomic formulas of first-order logic with equality. There are no
theories here: function and relation symbols are uninterpreted and have no
fixed arities.

We use sympy expressions as terms without introducing own classes. A variable
or a constant is a :class:`sympy.Symbol`, and a function application is an
application of an undefined :class:`sympy.Function` to a tuple of terms. Since
nothing is evaluated, the argument order of applications is preserved. We
collect a few helpers for such terms here.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, final, Iterator, Sequence, TypeAlias

import sympy
from sympy.core.function import AppliedUndef

from .formula import Formula


Variable = sympy.Symbol
"""Variables and constants. Both are symbols, which are uniquely identified
by their name. Whether a symbol is a variable is only decided by the
quantifiers around its occurrences.
"""

Term: TypeAlias = sympy.Expr
"""Terms are instances of :data:`Variable` or applications built with
:func:`function_app`.
"""


def function_app(name: str, args: Sequence[Term]) -> Term:
    """Apply the uninterpreted function symbol `name` to `args`.

    >>> x, y = Variable('x'), Variable('y')
    >>> function_app('f', [x, function_app('g', [y])])
    f(x, g(y))
    """
    return sympy.Function(name)(*args)


def is_function_app(term: object) -> bool:
    """
    >>> is_function_app(function_app('f', [Variable('x')]))
    True
    >>> is_function_app(Variable('x'))
    False
    """
    return isinstance(term, AppliedUndef)


def is_term(term: object) -> bool:
    """
    >>> is_term(Variable('c'))
    True
    >>> is_term(sympy.Integer(1))
    False
    """
    return is_variable(term) or is_function_app(term)


def is_variable(term: object) -> bool:
    """
    >>> is_variable(Variable('x'))
    True
    >>> is_variable(function_app('f', [Variable('x')]))
    False
    """
    return isinstance(term, Variable)


def term_args(term: Term) -> tuple[Term, ...]:
    """The argument terms of a function application. Symbols have none.
    """
    return term.args if is_function_app(term) else ()


def term_as_latex(term: Term) -> str:
    r"""LaTeX representation as a string.

    >>> x, y = Variable('x'), Variable('y')
    >>> term_as_latex(function_app('f', [x, function_app('g', [y])]))
    'f\\left(x,\\,g\\left(y\\right)\\right)'
    """
    if is_function_app(term):
        args = ',\\,'.join(term_as_latex(arg) for arg in term.args)
        return f'{term_name(term)}\\left({args}\\right)'
    return term_name(term)


def term_as_str(term: Term, sep: str = ', ') -> str:
    """String representation with arguments separated by `sep`.

    >>> x, y = Variable('x'), Variable('y')
    >>> t = function_app('f', [x, function_app('g', [y])])
    >>> term_as_str(t)
    'f(x, g(y))'
    >>> term_as_str(t, sep=',')
    'f(x,g(y))'
    """
    if is_function_app(term):
        return f'{term_name(term)}({sep.join(term_as_str(arg, sep) for arg in term.args)})'
    return term_name(term)


def term_name(term: Term) -> str:
    """The name of a symbol or the function name of an application.
    """
    match term:
        case sympy.Symbol():
            return term.name
        case AppliedUndef():
            return term.func.__name__
        case _:
            raise ValueError(f'{term!r} is not a term')


def term_names(term: Term) -> Iterator[str]:
    """An iterator over all symbol and function names in `term`, from left to
    right.

    >>> t = function_app('f', [Variable('x'), function_app('g', [Variable('c')])])
    >>> list(term_names(t))
    ['f', 'x', 'g', 'c']
    """
    yield term_name(term)
    for arg in term_args(term):
        yield from term_names(arg)


class AtomicFormula(Formula):
    """This abstract class collects what the atomic formulas :class:`Pred`,
    :class:`Eq`, and :class:`Ne` have in common. Subclasses specify their
    argument terms via :attr:`terms` and their representations.
    """

    @property
    @abstractmethod
    def terms(self) -> tuple[Term, ...]:
        """The argument terms from left to right.
        """
        ...

    @abstractmethod
    def __str__(self) -> str:
        #  Overloading here breaks an infinite recursion in the inherited
        #  method.
        ...

    @abstractmethod
    def as_latex(self) -> str:
        ...

    @final
    def atoms(self) -> Iterator[AtomicFormula]:
        yield self

    def subs(self, substitution: dict[Variable, Term]) -> AtomicFormula:
        """Simultaneous substitution of terms for variables. Only symbols are
        replaced, function names are left alone.

        >>> x, y = Variable('x'), Variable('y')
        >>> Eq(function_app('f', [x]), y).subs({x: y, y: x})
        f(y) == x
        """
        if not substitution:
            return self
        return self._with_terms(tuple(term.xreplace(substitution) for term in self.terms))

    @abstractmethod
    def _with_terms(self, terms: tuple[Term, ...]) -> AtomicFormula:
        """Construct an atomic formula with the same relation symbol as `self`
        and argument terms `terms`.
        """
        ...


def _check_terms(*args: object) -> None:
    for arg in args:
        if not is_term(arg):
            raise ValueError(f'{arg!r} is not a term')


@final
class Pred(AtomicFormula):
    """Application of an uninterpreted predicate symbol to a possibly empty
    sequence of terms.

    >>> x = Variable('x')
    >>> Pred('P', [x, function_app('f', [x])])
    P(x, f(x))
    >>> Pred('Q')
    Q
    """

    @property
    def name(self) -> str:
        """The predicate symbol.
        """
        return self.args[0]

    @property
    def terms(self) -> tuple[Term, ...]:
        return self.args[1]

    def __init__(self, name: str, terms: Sequence[Term] = ()) -> None:
        super().__init__()
        if not isinstance(name, str):
            raise ValueError(f'{name!r} is not a predicate name')
        _check_terms(*terms)
        self.args = (name, tuple(terms))

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if not self.terms:
            return self.name
        return f'{self.name}({", ".join(term_as_str(t) for t in self.terms)})'

    def as_latex(self) -> str:
        if not self.terms:
            return self.name
        args = ',\\,'.join(term_as_latex(t) for t in self.terms)
        return f'{self.name}\\left({args}\\right)'

    def _with_terms(self, terms: tuple[Term, ...]) -> Pred:
        return Pred(self.name, terms)


class BinaryRelation(AtomicFormula):
    """Common parts of the binary relations :class:`Eq` and :class:`Ne`.
    """

    SYMBOL: ClassVar[tuple[str, str, str]]
    """Representations of the relation symbol for :meth:`__repr__`,
    :meth:`__str__`, and :meth:`as_latex`, respectively.
    """

    @property
    def lhs(self) -> Term:
        """The left hand side term.
        """
        return self.args[0]

    @property
    def rhs(self) -> Term:
        """The right hand side term.
        """
        return self.args[1]

    @property
    def terms(self) -> tuple[Term, ...]:
        return self.args

    def __init__(self, lhs: Term, rhs: Term) -> None:
        super().__init__()
        _check_terms(lhs, rhs)
        self.args = (lhs, rhs)

    def __repr__(self) -> str:
        return f'{term_as_str(self.lhs)} {self.SYMBOL[0]} {term_as_str(self.rhs)}'

    def __str__(self) -> str:
        return f'{term_as_str(self.lhs)} {self.SYMBOL[1]} {term_as_str(self.rhs)}'

    def as_latex(self) -> str:
        return (f'{term_as_latex(self.lhs)}\\,{self.SYMBOL[2]}\\,'
                f'{term_as_latex(self.rhs)}')

    def _with_terms(self, terms: tuple[Term, ...]) -> BinaryRelation:
        return self.op(*terms)


@final
class Eq(BinaryRelation):
    """Equations between terms.

    >>> x, y = Variable('x'), Variable('y')
    >>> Eq(x, function_app('f', [y]))
    x == f(y)
    >>> print(_)
    x = f(y)
    """

    SYMBOL = ('==', '=', '=')


@final
class Ne(BinaryRelation):
    r"""Inequations between terms. Note that ``Ne(s, t)`` is an atomic formula
    in its own right and not the same as ``Not(Eq(s, t))``.

    >>> x, y = Variable('x'), Variable('y')
    >>> Ne(x, y)
    x != y
    >>> Ne(x, y).as_latex()
    'x\\,\\ne\\,y'
    """

    SYMBOL = ('!=', '≠', '\\ne')
