from folnf import (All, Ex, function_app, parse, Pred, Prefix,
                   QuantifiedFormula, skolemize, to_prenex, Variable)

x, y, z = Variable('x'), Variable('y'), Variable('z')


def test_skolem_function():
    prefix, matrix = to_prenex(parse(r'\forall x \exists y. P(x,y)'))
    assert prefix == Prefix((All, x), (Ex, y))
    result = skolemize(prefix, matrix)
    sk_f1 = function_app('sk_f1', [x])
    assert result.matrix == Pred('P', [x, sk_f1])
    assert result.mapping == [(y, sk_f1)]
    assert result.universals == [x]


def test_no_quantifiers_remain(sample, walk):
    result = skolemize(*to_prenex(sample))
    assert not any(isinstance(g, QuantifiedFormula) for g in walk(result.matrix))


def test_skolem_constant():
    result = skolemize(*to_prenex(parse(r'\exists x \forall y \exists z P(x, y, z)')))
    sk_c1 = Variable('sk_c1')
    sk_f1 = function_app('sk_f1', [y])
    assert result.matrix == Pred('P', [sk_c1, y, sk_f1])
    assert result.mapping == [(x, sk_c1), (z, sk_f1)]
    assert result.universals == [y]


def test_counters_are_separate():
    a, b, c = Variable('a'), Variable('b'), Variable('c')
    result = skolemize(*to_prenex(parse(r'\exists a \exists b \forall x \exists c R(a, b, x, c)')))
    assert result.mapping == [
        (a, Variable('sk_c1')),
        (b, Variable('sk_c2')),
        (c, function_app('sk_f1', [x]))]


def test_universals_in_prefix_order():
    result = skolemize(*to_prenex(parse(r'\forall y \forall x \exists z R(x, y, z)')))
    assert result.mapping == [(z, function_app('sk_f1', [y, x]))]
    assert result.universals == [y, x]


def test_every_occurrence_is_replaced():
    result = skolemize(*to_prenex(parse(r'\exists x (P(x) \land f(x) = x)')))
    assert result.matrix == parse('P(sk_c1) ∧ f(sk_c1) = sk_c1')
    assert 'x' not in set(result.matrix.names())


def test_used_names_are_skipped():
    result = skolemize(*to_prenex(parse(r'\exists x \exists y P(x, y, sk_c1, sk_c3)')))
    assert result.mapping == [(x, Variable('sk_c2')), (y, Variable('sk_c4'))]


def test_quantifier_free_input():
    f = parse(r'P(x) \lor Q')
    result = skolemize(Prefix(), f)
    assert result.matrix == f
    assert result.mapping == []
    assert result.universals == []


def test_predicate_names_are_skipped():
    result = skolemize(*to_prenex(parse(r'\exists x \exists y sk_c1(x, y)')))
    assert result.mapping == [(x, Variable('sk_c2')), (y, Variable('sk_c3'))]
    assert result.matrix == Pred('sk_c1', [Variable('sk_c2'), Variable('sk_c3')])
