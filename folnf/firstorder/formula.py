from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Iterator, Optional, Self
from typing_extensions import TypeIs

from IPython.lib import pretty


class Formula:
    r"""This abstract base class implements representations of and methods on
    first-order formulas with equality recursively built using first-order
    operators:

    1. Boolean operators:

       a. Negation :math:`\lnot`

       b. Conjunction :math:`\land` and disjunction :math:`\lor`

       c. Implication :math:`\longrightarrow`

       d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

    2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is
       a variable.

    As an abstract base class, :class:`Formula` cannot be instantiated.
    Formulas are immutable. All methods that transform formulas construct new
    ones, and subformulas may be safely shared between several formulas.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`lhs <.boolean.BinaryFormula.lhs>`, \
              :attr:`rhs <.boolean.BinaryFormula.rhs>` \
                -- sides of binary Boolean operators
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- argument formula of a logical :math:`\\neg`
            * :attr:`QuantifiedFormula.var <.quantified.QuantifiedFormula.var>`, \
              :attr:`QuantifiedFormula.arg <.quantified.QuantifiedFormula.arg>` \
                -- variable and scope of a quantifier
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`. Chains associate to the left.

        >>> from folnf.firstorder import Pred
        >>> Pred('P') & Pred('Q') & Pred('R')
        And(And(P, Q), R)
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for syntactic equality of `self` and `other`.

        Note that this is not a logical operator for equality.

        >>> from folnf.firstorder import Pred, Variable
        >>> x = Variable('x')
        >>> f1 = Pred('P', [x])
        >>> f2 = Pred('P', [x])
        >>> f1 == f2
        True
        >>> f1 is f2
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __getnewargs__(self) -> tuple[Any, ...]:
        return self.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__qualname__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.

        >>> from folnf.firstorder import Pred
        >>> ~ Pred('P')
        Not(P)
        """
        return Not(self)

    def __lshift__(self, other: Formula) -> Formula:
        r"""Override the :obj:`\<\< <object.__lshift__>` operator to apply
        :class:`.boolean.Implies` with reversed sides.

        >>> from folnf.firstorder import Pred
        >>> Pred('P') << Pred('Q')
        Implies(Q, P)
        """
        return Implies(other, self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.

        >>> from folnf.firstorder import Pred
        >>> Pred('P') | Pred('Q')
        Or(P, Q)
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        return f'{self.op.__name__}({", ".join(repr(arg) for arg in self.args)})'

    def __rshift__(self, other: Formula) -> Formula:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`.boolean.Implies`.

        >>> from folnf.firstorder import Pred
        >>> Pred('P') >> Pred('Q')
        Implies(P, Q)
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Representation of the formula used in printing. It uses Unicode
        symbols and is accepted by :func:`folnf.syntax.parser.parse`.

        >>> from folnf import parse
        >>> print(parse(r'\\forall x. (P(x) -> \\exists y \\neg R(x, f(y)))'))
        ∀x. (P(x) → (∃y. ¬R(x, f(y))))
        """
        SYMBOL: Final = {
            All: '∀', Ex: '∃', And: '∧', Or: '∨', Implies: '→',
            Equivalent: '↔', Not: '¬'}
        SPACING: Final = ' '
        match self:
            case All() | Ex():
                arg_as_str = str(self.arg)
                if not Formula.is_literal(self.arg):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[self.op]}{self.var}.{SPACING}{arg_as_str}'
            case And() | Or() | Implies() | Equivalent():
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if not Formula.is_literal(arg):
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_str = str(self.arg)
                if not Formula.is_atomic(self.arg):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{arg_as_str}'
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.__str__.
                assert False, repr(self)

    def as_latex(self) -> str:
        r"""LaTeX representation as a string. This is the display notation
        handed to the presentation layer. Operands of binary operators and
        scopes of quantifiers are grouped unless they are literals, and
        arguments of negations are grouped unless they are atomic. The result
        is accepted by :func:`folnf.syntax.parser.parse`.

        >>> from folnf import parse
        >>> parse('P(x) -> Q(x)').as_latex()
        'P\\left(x\\right)\\;\\rightarrow\\;Q\\left(x\\right)'
        >>> parse('~(a = b)').as_latex()
        '\\neg a\\,=\\,b'
        >>> parse(r'\forall x,y. ~(P(x) \land Q(y))').as_latex()
        '\\forall\\, x\\, \\left(\\forall\\, y\\, \\neg \\left(P\\left(x\\right)\\;\\land\\;Q\\left(y\\right)\\right)\\right)'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {
            All: '\\forall', Ex: '\\exists', And: '\\land', Or: '\\lor',
            Implies: '\\rightarrow', Equivalent: '\\leftrightarrow', Not: '\\neg'}
        match self:
            case All() | Ex():
                arg_as_latex = self.arg.as_latex()
                if not Formula.is_literal(self.arg):
                    arg_as_latex = f'\\left({arg_as_latex}\\right)'
                return f'{SYMBOL[self.op]}\\, {self.var.name}\\, {arg_as_latex}'
            case And() | Or() | Implies() | Equivalent():
                L = []
                for arg in self.args:
                    arg_as_latex = arg.as_latex()
                    if not Formula.is_literal(arg):
                        arg_as_latex = f'\\left({arg_as_latex}\\right)'
                    L.append(arg_as_latex)
                return f'\\;{SYMBOL[self.op]}\\;'.join(L)
            case Not():
                arg_as_latex = self.arg.as_latex()
                if not Formula.is_atomic(self.arg):
                    arg_as_latex = f'\\left({arg_as_latex}\\right)'
                return f'{SYMBOL[Not]} {arg_as_latex}'
            case _:
                # Atomic formulas are caught by the implementation of the
                # abstract method AtomicFormula.as_latex.
                assert False, repr(self)

    def atoms(self) -> Iterator[AtomicFormula]:
        """An iterator over all instances of :class:`AtomicFormula
        <.atomic.AtomicFormula>` occurring in `self`, from left to right.

        >>> from folnf import parse
        >>> list(parse('P(x) ∧ (x = y ∨ ¬P(x))').atoms())
        [P(x), x == y, P(x)]
        """
        match self:
            case All() | Ex():
                yield from self.arg.atoms()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                # Atomic formulas are caught by the final method
                # AtomicFormula.atoms.
                assert False, type(self)

    def depth(self) -> int:
        """The depth of a formula is the maximal length of a path from the root
        to a leaf in its expression tree. Atomic formulas have depth 0.

        >>> from folnf import parse
        >>> parse(r'\\exists y (P(y) \\lor \\neg Q)').depth()
        3
        """
        match self:
            case All() | Ex():
                return self.arg.depth() + 1
            case And() | Or() | Not() | Implies() | Equivalent():
                return max(arg.depth() for arg in self.args) + 1
            case AtomicFormula():
                return 0
            case _:
                assert False, type(self)

    def eliminate_imp_iff(self) -> Formula:
        """Eliminate implications and equivalences bottom-up. The result
        contains only :class:`Not <.boolean.Not>`, :class:`And <.boolean.And>`,
        :class:`Or <.boolean.Or>` and quantifiers:

        * ``Implies(A, B)`` becomes ``Or(Not(A'), B')``,
        * ``Equivalent(A, B)`` becomes ``And(Or(Not(A'), B'), Or(Not(B'),
          A'))``,

        where ``A'`` and ``B'`` are the results of the elimination in ``A`` and
        ``B``, respectively.

        >>> from folnf import parse
        >>> parse('P <-> (Q -> R)').eliminate_imp_iff()
        And(Or(Not(P), Or(Not(Q), R)), Or(Not(Or(Not(Q), R)), P))
        """
        match self:
            case Equivalent(lhs=lhs, rhs=rhs):
                lhs_elim = lhs.eliminate_imp_iff()
                rhs_elim = rhs.eliminate_imp_iff()
                return And(Or(Not(lhs_elim), rhs_elim), Or(Not(rhs_elim), lhs_elim))
            case Implies(lhs=lhs, rhs=rhs):
                return Or(Not(lhs.eliminate_imp_iff()), rhs.eliminate_imp_iff())
            case And() | Or() | Not():
                return self.op(*(arg.eliminate_imp_iff() for arg in self.args))
            case All() | Ex():
                return self.op(self.var, self.arg.eliminate_imp_iff())
            case AtomicFormula():
                return self
            case _:
                assert False, type(self)

    @staticmethod
    def is_atomic(f: Formula) -> TypeIs[AtomicFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.atomic.AtomicFormula`.
        """
        return isinstance(f, AtomicFormula)

    @staticmethod
    def is_boolean_formula(f: Formula) -> TypeIs[BooleanFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.boolean.BooleanFormula`.
        """
        return isinstance(f, BooleanFormula)

    @staticmethod
    def is_literal(f: Formula) -> bool:
        """Test whether `f` is an atomic formula or a negation. Note that the
        argument of a negation is not inspected. In NNF, this coincides with
        the usual notion of a literal.
        """
        return isinstance(f, (AtomicFormula, Not))

    @staticmethod
    def is_quantified_formula(f: Formula) -> TypeIs[QuantifiedFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.quantified.QuantifiedFormula`.
        """
        return isinstance(f, QuantifiedFormula)

    def matrix(self) -> tuple[Formula, Prefix]:
        """The matrix of a prenex formula is its quantifier-free part. Its
        prefix holds the leading quantifiers from the outside to the inside.

        >>> from folnf import parse
        >>> m, p = parse(r'\\forall x \\exists y. P(x, y)').matrix()
        >>> m
        P(x, y)
        >>> p
        Prefix((All, x), (Ex, y))

        If `self` is not prenex, then only the leading quantifiers are
        considered, and the matrix will not be quantifier-free.

        .. seealso::
            * :meth:`quantify` -- add quantifier prefix
            * :func:`.pnf.to_prenex` -- prenex extraction
        """
        mat = self
        pre = Prefix()
        while Formula.is_quantified_formula(mat):
            pre.append((mat.op, mat.var))
            mat = mat.arg
        return mat, pre

    def names(self) -> Iterator[str]:
        """An iterator over all names in use: every quantified variable and
        every symbol and function name occurring in a term. Predicate names
        are not included. Names may be reported several times.

        >>> from folnf import parse
        >>> sorted(set(parse(r'\\forall x. P(f(x), c) \\land \\exists z. z = y').names()))
        ['c', 'f', 'x', 'y', 'z']
        """
        match self:
            case All() | Ex():
                yield self.var.name
                yield from self.arg.names()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.names()
            case AtomicFormula():
                for term in self.terms:
                    yield from term_names(term)
            case _:
                assert False, type(self)

    def qvars(self) -> Iterator[Variable]:
        """An iterator over all quantified variables in `self`, once for
        each quantifier.

        >>> from folnf import parse
        >>> list(parse(r'\\forall y (\\exists x P(x) \\land \\exists x Q(x))').qvars())
        [y, x, x]
        """
        match self:
            case All() | Ex():
                yield self.var
                yield from self.arg.qvars()
            case And() | Or() | Not() | Implies() | Equivalent():
                for arg in self.args:
                    yield from arg.qvars()
            case AtomicFormula():
                yield from ()
            case _:
                assert False, type(self)

    def quantify(self, prefix: Prefix) -> Formula:
        """Add quantifier prefix.

        >>> from folnf.firstorder import All, Ex, Pred, Prefix, Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> Pred('P', [x, y]).quantify(Prefix((All, x), (Ex, y)))
        All(x, Ex(y, P(x, y)))

        .. seealso::
            * :class:`Prefix <.quantified.Prefix>` -- a quantifier prefix
            * :meth:`matrix` -- prenex formula without quantifier prefix
        """
        f = self
        for q, v in reversed(prefix):
            f = q(v, f)
        return f

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def subs(self, substitution: dict[Variable, Term]) -> Self:
        """Simultaneous substitution of terms for free occurrences of
        variables.

        >>> from folnf import parse
        >>> from folnf.firstorder import Variable, function_app
        >>> x, y, z = Variable('x'), Variable('y'), Variable('z')
        >>> f = parse(r'P(x, y) \\land \\exists x. Q(x, y)')
        >>> f.subs({x: function_app('g', [y]), y: z})
        And(P(g(y), z), Ex(x, Q(x, z)))

        Quantifiers are not renamed. A term that is substituted into the
        scope of a quantifier must not contain the quantified variable, which
        holds for instance after :func:`.standardize.standardize_apart`.
        """
        if Formula.is_quantified_formula(self):
            if self.var in substitution:
                substitution = substitution.copy()
                del substitution[self.var]
            return self.op(self.var, self.arg.subs(substitution))  # type: ignore[return-value]
        elif Formula.is_boolean_formula(self):
            return self.op(*(arg.subs(substitution) for arg in self.args))  # type: ignore[return-value]
        else:
            # Atomic formulas are caught by the implementation of the
            # method AtomicFormula.subs.
            assert False, type(self)

    def to_nnf(self, _not: bool = False) -> Formula:
        """Convert to Negation Normal Form.

        A Negation Normal Form (NNF) is an equivalent formula within which the
        application of :class:`Not <.boolean.Not>` is restricted to atomic
        formulas. The only other operators admitted are :class:`And
        <.boolean.And>`, :class:`Or <.boolean.Or>`, :class:`Ex
        <.quantified.Ex>`, and :class:`All <.quantified.All>`. Negations are
        moved inside using the laws of De Morgan and the duality of the
        quantifiers, and double negations cancel. Implications and
        equivalences are eliminated on the way using
        :meth:`eliminate_imp_iff`.

        >>> from folnf import parse
        >>> parse(r'\\neg \\forall x (P(x) \\land \\neg\\neg \\exists y. x \\neq y)').to_nnf()
        Ex(x, Or(Not(P(x)), All(y, Not(x != y))))
        """
        match self:
            case All() | Ex():
                nnf_op: type[QuantifiedFormula] = self.dual() if _not else self.op
                return nnf_op(self.var, self.arg.to_nnf(_not=_not))
            case Equivalent() | Implies():
                return self.eliminate_imp_iff().to_nnf(_not=_not)
            case And() | Or():
                nnf_bop: type[And | Or] = self.dual() if _not else self.op
                return nnf_bop(self.lhs.to_nnf(_not=_not), self.rhs.to_nnf(_not=_not))
            case Not():
                return self.arg.to_nnf(_not=not _not)
            case AtomicFormula():
                return Not(self) if _not else self
            case _:
                assert False, type(self)


# The following imports are intentionally late to avoid circularity.
from .atomic import AtomicFormula, Term, term_names, Variable
from .boolean import And, BooleanFormula, Equivalent, Implies, Not, Or
from .quantified import All, Ex, Prefix, QuantifiedFormula
