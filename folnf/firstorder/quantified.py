r"""We provide subclasses of :class:`Formula <.formula.Formula>` that implement
quantified formulas in the sense that their toplevel operator is one of the
quantifiers :math:`\exists` or :math:`\forall`.
"""
from __future__ import annotations

from collections import deque
from typing import final, Sequence

from .atomic import Variable
from .formula import Formula


class QuantifiedFormula(Formula):
    r"""A class whose instances are quantified formulas in the sense that their
    toplevel operator is one of the quantifiers :math:`\exists` or
    :math:`\forall`. Note that members of :class:`QuantifiedFormula` may have
    subformulas with other logical operators deeper in the expression tree.
    """
    @property
    def var(self) -> Variable:
        """The variable of the quantifier.

        >>> from folnf.firstorder import Eq
        >>> x, y = Variable('x'), Variable('y')
        >>> f = All(x, Ex(y, Eq(x, y)))
        >>> f.var
        x

        .. seealso::
            * :attr:`args <.formula.Formula.op>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def arg(self) -> Formula:
        """The subformula in the scope of the :class:`QuantifiedFormula`.

        >>> from folnf.firstorder import Eq
        >>> x, y = Variable('x'), Variable('y')
        >>> f = All(x, Ex(y, Eq(x, y)))
        >>> f.arg
        Ex(y, x == y)
        """
        return self.args[1]

    def __init__(self, vars_: Variable | Sequence[Variable], arg: Formula) -> None:
        """Construct a quantified formula. A sequence of variables is a
        shorthand for nested quantifiers, with the last variable innermost.

        >>> from folnf.firstorder import Pred
        >>> a, b, x = Variable('a'), Variable('b'), Variable('x')
        >>> All((a, b), Ex(x, Pred('P', [a, b, x])))
        All(a, All(b, Ex(x, P(a, b, x))))
        """
        assert self.op in (Ex, All)  # in lack of abstract class properties
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        match vars_:
            case Variable():
                self.args = (vars_, arg)
            case (Variable(), *_):
                f = arg
                for v in reversed(vars_[1:]):
                    if not isinstance(v, Variable):
                        raise ValueError(f'{v!r} is not a Variable')
                    f = self.op(v, f)
                self.args = (vars_[0], f)
            case _:
                raise ValueError(f'{vars_!r} is not a Variable')


@final
class Ex(QuantifiedFormula):
    r"""A class whose instances are existentially quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\exists`. Besides variables, the quantifier accepts sequences of
    variables as a shorthand.

    >>> from folnf.firstorder import Pred
    >>> x, y = Variable('x'), Variable('y')
    >>> Ex(x, Pred('P', [x]))
    Ex(x, P(x))
    >>> Ex([x, y], Pred('R', [x, y]))
    Ex(x, Ex(y, R(x, y)))
    """
    @classmethod
    def dual(cls) -> type[All]:
        r"""A class method yielding the class :class:`All`, which implements
        the dual operator :math:`\forall` of :math:`\exists`.
        """
        return All


@final
class All(QuantifiedFormula):
    r"""A class whose instances are universally quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\forall`.

    >>> from folnf.firstorder import Pred
    >>> x = Variable('x')
    >>> All(x, Pred('P', [x]))
    All(x, P(x))
    """
    @classmethod
    def dual(cls) -> type[Ex]:
        """A class method yielding the dual class :class:`Ex` of class:`All`.
        """
        return Ex


class Prefix(deque[tuple[type[All | Ex], Variable]]):
    r"""Holds a quantifier prefix of a formula as a sequence of pairs of a
    quantifier and a variable, from the outermost to the innermost.

    >>> x, y = Variable('x'), Variable('y')
    >>> p = Prefix((All, x), (Ex, y))
    >>> p
    Prefix((All, x), (Ex, y))
    >>> print(p)
    ∀x ∃y
    >>> p.as_latex()
    '\\forall\\, x\\, \\exists\\, y'

    .. seealso::
        * :external:class:`collections.deque` -- for methods inherited from double-ended queues
        * :meth:`matrix <.Formula.matrix>` -- the matrix of a prenex formula
        * :meth:`quantify <.Formula.quantify>` -- add quantifier prefix
    """

    def __init__(self, *pairs: tuple[type[All | Ex], Variable]) -> None:
        super().__init__(pairs)

    def __repr__(self) -> str:
        return f'Prefix({", ".join(f"({q.__name__}, {v})" for q, v in self)})'

    def __str__(self) -> str:
        SYMBOL = {All: '∀', Ex: '∃'}
        return ' '.join(f'{SYMBOL[q]}{v}' for q, v in self)

    def as_latex(self) -> str:
        SYMBOL = {All: '\\forall', Ex: '\\exists'}
        return '\\, '.join(f'{SYMBOL[q]}\\, {v.name}' for q, v in self)

    def universals(self) -> list[Variable]:
        """The universally quantified variables, from the outside to the
        inside.

        >>> x, y, z = Variable('x'), Variable('y'), Variable('z')
        >>> Prefix((All, x), (Ex, y), (All, z)).universals()
        [x, z]
        """
        return [v for q, v in self if q is All]
