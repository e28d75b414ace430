from collections import Counter

import pytest

from folnf import (All, And, AtomicFormula, eliminate_imp_iff, Equivalent, Ex,
                   Implies, Not, Or, parse, Pred, Prefix, prenex_to_display,
                   QuantifiedFormula, standardize_apart, to_nnf, to_prenex,
                   Variable)
from folnf.firstorder import StandardizeApart

x, y, z = Variable('x'), Variable('y'), Variable('z')
P, Q, R = Pred('P'), Pred('Q'), Pred('R')


def Px(v):
    return Pred('P', [v])


def Qx(v):
    return Pred('Q', [v])


# Elimination of implications and equivalences

def test_eliminate_implication():
    assert eliminate_imp_iff(parse('P(x) -> Q(x)')) == Or(Not(Px(x)), Qx(x))


def test_eliminate_equivalence():
    assert eliminate_imp_iff(parse('P <-> Q')) == And(Or(Not(P), Q), Or(Not(Q), P))


def test_eliminate_below_quantifiers_and_negations():
    assert eliminate_imp_iff(parse(r'\neg \forall x (P(x) -> Q(x))')) == \
        Not(All(x, Or(Not(Px(x)), Qx(x))))


def test_eliminate_keeps_other_nodes(sample, walk):
    f = eliminate_imp_iff(sample)
    assert not any(isinstance(g, (Implies, Equivalent)) for g in walk(f))
    # Equivalences duplicate their operands together with their quantifiers.
    assert set(f.qvars()) == set(sample.qvars())


def test_passes_do_not_modify_their_input():
    text = r'\forall x (P(x) <-> \exists x Q(x))'
    f = parse(text)
    eliminate_imp_iff(f)
    to_nnf(f)
    standardize_apart(f.to_nnf())
    to_prenex(f)
    assert f == parse(text)


# Negation normal form

def test_de_morgan():
    assert to_nnf(parse(r'\neg (P \land Q)')) == Or(Not(P), Not(Q))
    assert to_nnf(parse(r'\neg (P \lor Q)')) == And(Not(P), Not(Q))


def test_quantifier_duality():
    assert to_nnf(parse(r'\neg \forall x P(x)')) == Ex(x, Not(Px(x)))
    assert to_nnf(parse(r'\neg \exists x P(x)')) == All(x, Not(Px(x)))


def test_double_negation():
    assert to_nnf(parse(r'\neg \neg P')) == P
    assert to_nnf(parse(r'\neg \neg \neg x = y')) == parse('~ x = y')


def test_nnf_of_end_to_end_example_is_unchanged():
    f = eliminate_imp_iff(parse('P(x) -> Q(x)'))
    assert to_nnf(f) == f


def test_nnf_invariant(sample, walk):
    f = to_nnf(eliminate_imp_iff(sample))
    for g in walk(f):
        assert not isinstance(g, (Implies, Equivalent))
        if isinstance(g, Not):
            assert isinstance(g.arg, AtomicFormula)


def test_nnf_eliminates_implications_on_the_way(sample):
    assert to_nnf(sample) == to_nnf(eliminate_imp_iff(sample))


# Standardizing apart

def test_fresh_name():
    used = {'x', 'x1', 'y2'}
    assert StandardizeApart.fresh_name('x', used) == 'x2'
    assert StandardizeApart.fresh_name('x', used) == 'x3'
    assert StandardizeApart.fresh_name('y2', used) == 'y1'
    assert StandardizeApart.fresh_name('y', used) == 'y3'
    assert StandardizeApart.fresh_name('_0', used) == 'x4'
    assert {'x2', 'x3', 'y1', 'y3', 'x4'} <= used


def test_standardize_shadowing():
    f = parse(r'\forall x (P(x) \land \exists x Q(x)) \land R(x)')
    assert standardize_apart(f) == And(
        All(Variable('x1'), And(Px(Variable('x1')), Ex(Variable('x2'), Qx(Variable('x2'))))),
        Pred('R', [x]))


def test_standardize_avoids_function_names():
    f = parse(r'\exists x P(x1(c), y1)')
    assert standardize_apart(f) == parse(r'\exists x2 P(x1(c), y1)')


def test_standardize_has_no_state_between_calls():
    f = parse(r'\forall x P(x)')
    assert standardize_apart(f) == standardize_apart(f) == All(Variable('x1'), Px(Variable('x1')))


def test_standardization_invariant(sample):
    f = standardize_apart(to_nnf(sample))
    counts = Counter(f.qvars())
    assert all(n == 1 for n in counts.values())
    assert not {v.name for v in counts} & set(sample.names())


# Prenex form

def test_prenex_order():
    f = parse(r'\forall x P(x) \lor \exists y \forall z R(y, z)')
    prefix, matrix = to_prenex(f)
    assert prefix == Prefix((All, x), (Ex, y), (All, z))
    assert matrix == Or(Px(x), Pred('R', [y, z]))


def test_prenex_of_quantifier_free_formula():
    f = parse(r'P \land \neg Q')
    assert to_prenex(f) == (Prefix(), f)


def test_prenex_brings_input_to_nnf():
    assert to_prenex(parse(r'\neg \exists x P(x)')) == (Prefix((All, x)), Not(Px(x)))


def test_prenex_completeness(sample, walk):
    f = standardize_apart(to_nnf(sample))
    prefix, matrix = to_prenex(f)
    assert not any(isinstance(g, QuantifiedFormula) for g in walk(matrix))
    assert [v for _, v in prefix] == list(f.qvars())
    assert matrix.quantify(prefix).matrix() == (matrix, prefix)


@pytest.mark.parametrize('text, display', [
    (r'\forall x \exists y. P(x, y)',
     '\\forall\\, x\\, \\exists\\, y\\; P\\left(x,\\,y\\right)'),
    (r'P \lor Q',
     '\\left(P\\;\\lor\\;Q\\right)'),
    (r'\exists x \neg P(x)',
     '\\exists\\, x\\; \\neg P\\left(x\\right)')])
def test_prenex_to_display(text, display):
    assert prenex_to_display(*to_prenex(parse(text))) == display
