"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`.
"""
from __future__ import annotations

from typing import final

from .formula import Formula


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\lnot`,
    :math:`\wedge`, :math:`\vee`, :math:`\longrightarrow`,
    :math:`\longleftrightarrow`.
    """

    def __init__(self, *args: Formula) -> None:
        super().__init__()
        for arg in args:
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        self.args = args


class BinaryFormula(BooleanFormula):
    """A class whose instances are Boolean formulas with a binary toplevel
    operator. All binary operators are strictly binary. Longer chains are
    nested, and the nesting is never rearranged.
    """

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__(lhs, rhs)

    @property
    def lhs(self) -> Formula:
        """The left-hand side of the operator.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side of the operator.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]


@final
class Equivalent(BinaryFormula):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longleftrightarrow`.

    >>> from folnf.firstorder import Pred, Variable
    >>> x = Variable('x')
    >>> Equivalent(Pred('P', [x]), Pred('Q', [x]))
    Equivalent(P(x), Q(x))
    """
    pass


@final
class Implies(BinaryFormula):
    """A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator :math:`\\longrightarrow`.

    >>> from folnf.firstorder import Pred
    >>> Implies(Pred('P'), Pred('Q'))
    Implies(P, Q)

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
        * :meth:`\\<\\<, __lshift__() <.formula.Formula.__lshift__>` -- \
            infix notation of converse :class:`Implies`
    """
    pass


@final
class And(BinaryFormula):
    """A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\\wedge`.

    >>> from folnf.firstorder import Pred
    >>> And(Pred('P'), And(Pred('Q'), Pred('R')))
    And(P, And(Q, R))

    .. seealso::
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :class:`And`
    """

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or


@final
class Or(BinaryFormula):
    """A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\\vee`.

    >>> from folnf.firstorder import Pred
    >>> Or(Or(Pred('P'), Pred('Q')), Pred('R'))
    Or(Or(P, Q), R)

    .. seealso::
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :class:`Or`
    """

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And


@final
class Not(BooleanFormula):
    """A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator
    :math:`\\neg`.

    >>> from folnf.firstorder import Eq, Variable
    >>> x, y = Variable('x'), Variable('y')
    >>> Not(Eq(x, y))
    Not(x == y)

    .. seealso::
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Formula) -> None:
        super().__init__(arg)

    @property
    def arg(self) -> Formula:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]
