r"""Implementation of first-order formulas with equality over uninterpreted
function and relation symbols, together with the syntactic normal form
computations on them.

An abstract base class :class:`Formula` implements representations of and
methods on first-order formulas recursively built using first-order operators:

1. Boolean operators:

   a. Negation :math:`\lnot`

   b. Conjunction :math:`\land` and disjunction :math:`\lor`

   c. Implication :math:`\longrightarrow`

   d. Bi-implication (syntactic equivalence) :math:`\longleftrightarrow`

2. Quantifiers :math:`\exists x` and :math:`\forall x`, where :math:`x` is a
   variable.

Boolean operators are implemented as classes derived from another abstract
class :class:`BooleanFormula` which is, in turn, derived from :class:`Formula`.
Operators are mapped to classes as follows:

+---------------+---------------+--------------+-------------------------+-----------------------------+
| :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` | :math:`\longleftrightarrow` |
+---------------+---------------+--------------+-------------------------+-----------------------------+
| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies`        | :class:`Equivalent`         |
+---------------+---------------+--------------+-------------------------+-----------------------------+

Conjunction, disjunction, implication, and equivalence are strictly binary.
Atomic formulas are predicate applications :class:`Pred`, equations
:class:`Eq`, and inequations :class:`Ne`. Their argument terms are sympy
expressions built from :data:`Variable` and :func:`function_app`:

>>> x, y = Variable('x'), Variable('y')
>>> f = Ex(x, And(Pred('P', [x]), Ne(x, function_app('f', [y]))))
>>> f
Ex(x, And(P(x), x != f(y)))
>>> print(f)
∃x. (P(x) ∧ x ≠ f(y))

Quantifiers are mapped to classes as follows:

+-----------------+-----------------+
| :math:`\exists` | :math:`\forall` |
+-----------------+-----------------+
| :class:`Ex`     | :class:`All`    |
+-----------------+-----------------+

The normal form computations are provided as module-level callables
:func:`standardize_apart`, :func:`to_prenex`, :func:`to_cnf`,
:func:`to_dnf`, :func:`skolemize`, and :func:`clauses_from_cnf`. All of them
construct new formulas. Formulas are never modified in place.
"""  # noqa

from .formula import Formula  # noqa

from .atomic import (AtomicFormula, BinaryRelation, Eq, function_app,  # noqa
                     is_function_app, is_variable, Ne, Pred, Term, term_args,
                     term_as_latex, term_as_str, term_name, term_names,
                     Variable)

from .boolean import BooleanFormula, BinaryFormula, Equivalent, Implies, And, Or, Not  # noqa

from .quantified import QuantifiedFormula, Ex, All, Prefix  # noqa

from .standardize import standardize_apart, StandardizeApart  # noqa

from .pnf import prenex_to_display, PrenexNormalForm, to_prenex  # noqa

from .bnf import BooleanNormalForm, to_cnf, to_dnf  # noqa

from .skolem import Skolemization, skolemize, SkolemResult  # noqa

from .clauses import (Clause, ClauseExtraction, ClauseSet,  # noqa
                      clauses_from_cnf, clauses_to_display, horn_report,
                      HornReport, InvariantViolation, Literal)


__all__ = [
    'Pred', 'Eq', 'Ne', 'Variable', 'function_app',

    'Ex', 'All', 'Prefix',

    'Equivalent', 'Implies', 'And', 'Or', 'Not',

    'standardize_apart', 'to_prenex', 'prenex_to_display', 'to_cnf',
    'to_dnf', 'skolemize', 'clauses_from_cnf', 'horn_report',
    'clauses_to_display'
]
