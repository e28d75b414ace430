import pytest

from folnf import (All, And, Eq, Equivalent, Ex, function_app, Implies, Ne,
                   Not, Or, parse, ParseError, Pred, Variable)

x, y, z, c = Variable('x'), Variable('y'), Variable('z'), Variable('c')
P, Q, R, S, T = Pred('P'), Pred('Q'), Pred('R'), Pred('S'), Pred('T')


def f(*args):
    return function_app('f', args)


def test_implication_of_predicates():
    assert parse('P(x) -> Q(x)') == Implies(Pred('P', [x]), Pred('Q', [x]))


def test_precedence():
    assert parse(r'P <-> Q -> R \lor S \land T') == \
        Equivalent(P, Implies(Q, Or(R, And(S, T))))
    assert parse(r'P \land Q \lor R \land S') == Or(And(P, Q), And(R, S))


@pytest.mark.parametrize('text, op', [
    (r'P \land Q \land R', And),
    (r'P \lor Q \lor R', Or),
    ('P -> Q -> R', Implies),
    ('P <-> Q <-> R', Equivalent)])
def test_left_associativity(text, op):
    assert parse(text) == op(op(P, Q), R)


def test_parentheses_override_associativity():
    assert parse(r'P \land (Q \land R)') == And(P, And(Q, R))


def test_brackets_are_interchangeable():
    assert parse(r'[P \lor Q] \land {R}') == parse(r'(P \lor Q) \land (R)')


def test_negation_binds_tighter_than_conjunction():
    assert parse(r'\neg P \land Q') == And(Not(P), Q)
    assert parse(r'\neg \neg P') == Not(Not(P))


def test_quantifier_variable_list():
    expected = All(x, All(y, Ex(z, Pred('R', [x, y, z]))))
    assert parse(r'\forall x, y \exists z. R(x, y, z)') == expected
    assert parse('∀x,y: ∃z R(x, y, z)') == expected


def test_quantifier_scope_is_unary():
    assert parse(r'\forall x P(x) \land Q(x)') == And(All(x, Pred('P', [x])), Pred('Q', [x]))
    assert parse(r'\forall x. \neg P(x) \lor Q') == Or(All(x, Not(Pred('P', [x]))), Q)


def test_quantifier_scope_in_parentheses():
    assert parse(r'\exists x (P(x) \land Q(x))') == Ex(x, And(Pred('P', [x]), Pred('Q', [x])))


def test_equations():
    assert parse('f(x, y) = g(c)') == Eq(f(x, y), function_app('g', [c]))
    assert parse(r'x \neq y') == Ne(x, y)
    assert parse('~ x = y') == Not(Eq(x, y))
    assert parse(r'P(x) \land x ≠ f(x)') == And(Pred('P', [x]), Ne(x, f(x)))


def test_speculative_term_falls_back_to_predicate():
    assert parse('P(f(x), y)') == Pred('P', [f(x), y])
    assert parse(r'P(x) \land Q') == And(Pred('P', [x]), Q)


def test_empty_argument_lists():
    assert parse('P()') == P
    assert parse('f() = c') == Eq(Variable('f'), c)


def test_nested_function_applications():
    g = function_app('g', [f(x), y])
    assert parse('P(g(f(x), y))') == Pred('P', [g])


def test_rejects_trailing_input():
    with pytest.raises(ParseError) as exc_info:
        parse('P(x) Q(x)')
    assert exc_info.value.pos == 5


@pytest.mark.parametrize('text', [
    '',
    r'P \land',
    '(P',
    'P)',
    r'\forall (P)',
    r'\exists x',
    'f(x) =',
    'P(x,)',
    'P(x',
    '= x',
    'x = y = z'])
def test_rejects_malformed_input(text):
    with pytest.raises(ParseError):
        parse(text)
