r"""Convert to Prenex Normal Form.

A Prenex Normal Form (PNF) is a Negation Normal Form (NNF) in which all
quantifiers :class:`Ex` and :class:`All` stand at the beginning of the
formula. Here we pull the quantifiers out in the order in which they are
encountered in a left-to-right, outside-in traversal. There is no attempt to
minimize quantifier alternations.

The input is expected to be standardized apart via
:func:`.standardize.standardize_apart`. Otherwise pulling a quantifier over
another subformula could capture variables there.
"""

from __future__ import annotations

from .atomic import AtomicFormula
from .boolean import And, Equivalent, Implies, Not, Or
from .formula import Formula
from .quantified import All, Ex, Prefix


class PrenexNormalForm:
    """Compute a prenex normal form as a pair of a quantifier prefix and a
    quantifier-free matrix.

    >>> from folnf import parse
    >>> prefix, matrix = to_prenex(parse(r'\\forall x P(x) \\lor \\exists y \\forall z R(y, z)'))
    >>> prefix
    Prefix((All, x), (Ex, y), (All, z))
    >>> matrix
    Or(P(x), R(y, z))
    """

    def __call__(self, f: Formula) -> tuple[Prefix, Formula]:
        return self.pull(f)

    def pull(self, f: Formula) -> tuple[Prefix, Formula]:
        """Recursively pull quantifiers. For :class:`And` and :class:`Or`,
        the prefix of the left hand side precedes the prefix of the right
        hand side. Negations of non-atomic formulas, implications, and
        equivalences are converted to NNF first.
        """
        match f:
            case All(var=var, arg=arg) | Ex(var=var, arg=arg):
                prefix, matrix = self.pull(arg)
                prefix.appendleft((f.op, var))
                return prefix, matrix
            case And(lhs=lhs, rhs=rhs) | Or(lhs=lhs, rhs=rhs):
                lhs_prefix, lhs_matrix = self.pull(lhs)
                rhs_prefix, rhs_matrix = self.pull(rhs)
                lhs_prefix.extend(rhs_prefix)
                return lhs_prefix, f.op(lhs_matrix, rhs_matrix)
            case Not(arg=AtomicFormula()) | AtomicFormula():
                return Prefix(), f
            case Not() | Implies() | Equivalent():
                return self.pull(f.to_nnf())
            case _:
                assert False, type(f)


to_prenex = PrenexNormalForm()
"""User interface for the computation of a prenex normal form.
"""


def prenex_to_display(prefix: Prefix, matrix: Formula) -> str:
    r"""LaTeX display of a prenex formula given as `prefix` and `matrix`. The
    matrix is grouped unless it is a literal. An empty prefix yields only the
    matrix.

    >>> from folnf import parse
    >>> prenex_to_display(*to_prenex(parse(r'\forall x \exists y (P(x) \land Q(y))')))
    '\\forall\\, x\\, \\exists\\, y\\; \\left(P\\left(x\\right)\\;\\land\\;Q\\left(y\\right)\\right)'
    >>> prenex_to_display(Prefix(), parse('~P'))
    '\\neg P'
    """
    matrix_as_latex = matrix.as_latex()
    if not Formula.is_literal(matrix):
        matrix_as_latex = f'\\left({matrix_as_latex}\\right)'
    if not prefix:
        return matrix_as_latex
    return f'{prefix.as_latex()}\\; {matrix_as_latex}'
