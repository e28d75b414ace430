__version__ = '0.1.0'

from . import firstorder

from .firstorder import (Formula, AtomicFormula, Term, Variable,  # noqa
                         function_app, Pred, Eq, Ne, BooleanFormula,
                         Equivalent, Implies, And, Or, Not, QuantifiedFormula,
                         Ex, All, Prefix, standardize_apart, to_prenex,
                         prenex_to_display, to_cnf, to_dnf, skolemize,
                         SkolemResult, Literal, Clause, ClauseSet,
                         clauses_from_cnf, clauses_to_display, horn_report,
                         HornReport, InvariantViolation)

from .syntax import ParseError, parse, Token, TokenKind, TokenizeError, tokenize  # noqa

from .pipeline import NormalFormPipeline, Options, pipeline, PipelineResult  # noqa


def eliminate_imp_iff(f: Formula) -> Formula:
    """Functional interface to :meth:`.Formula.eliminate_imp_iff`.
    """
    return f.eliminate_imp_iff()


def to_nnf(f: Formula) -> Formula:
    """Functional interface to :meth:`.Formula.to_nnf`.
    """
    return f.to_nnf()


def formula_to_display(f: Formula) -> str:
    r"""The LaTeX display notation of `f`, which is accepted by :func:`parse`.

    >>> f = parse(r'\forall x \exists y (P(x) \leftrightarrow \neg y = f(x))')
    >>> formula_to_display(f)
    '\\forall\\, x\\, \\left(\\exists\\, y\\, \\left(P\\left(x\\right)\\;\\leftrightarrow\\;\\neg y\\,=\\,f\\left(x\\right)\\right)\\right)'
    >>> parse(formula_to_display(f)) == f
    True
    """
    return f.as_latex()


__all__ = firstorder.__all__ + [
    'parse', 'tokenize', 'eliminate_imp_iff', 'to_nnf', 'formula_to_display',
    'pipeline', 'ParseError', 'TokenizeError', 'InvariantViolation'
]
