import logging

import pytest

from folnf import (All, Ex, Implies, NormalFormPipeline, Not, Or, parse,
                   ParseError, pipeline, Pred, Prefix, TokenizeError, Variable)
from folnf.pipeline import logger
from folnf.support.excepthook import NoTraceException


class ListHandler(logging.Handler):

    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_end_to_end_example():
    x = Variable('x')
    Px, Qx = Pred('P', [x]), Pred('Q', [x])
    result = pipeline('P(x) -> Q(x)')
    assert result.original == Implies(Px, Qx)
    assert result.no_imp_iff == Or(Not(Px), Qx)
    assert result.nnf == result.no_imp_iff
    assert result.standardized == result.nnf
    assert result.prefix == Prefix()
    assert result.cnf == result.dnf == result.pcnf == result.pdnf == Or(Not(Px), Qx)
    assert [[str(lit) for lit in clause] for clause in result.clauses] == [['~P(x)', 'Q(x)']]
    assert result.horn.is_horn


def test_stages():
    result = pipeline(r'\neg \exists x \forall y (R(x, y) \lor \neg P(y)) \land \exists z Q(z)')
    x1, y1, z1 = Variable('x1'), Variable('y1'), Variable('z1')
    assert result.prefix == Prefix((All, x1), (Ex, y1), (Ex, z1))
    assert str(result.matrix) == '(¬R(x1, y1) ∧ P(y1)) ∧ Q(z1)'
    assert str(result.skolem.matrix) == \
        '(¬R(x1, sk_f1(x1)) ∧ P(sk_f1(x1))) ∧ Q(sk_f2(x1))'
    assert [[str(lit) for lit in clause] for clause in result.clauses] == \
        [['~R(x1,sk_f1(x1))'], ['P(sk_f1(x1))'], ['Q(sk_f2(x1))']]
    assert result.horn.is_horn


def test_non_horn_result():
    result = pipeline(r'\forall x (P(x) \lor Q(x)) \land \neg R')
    assert not result.horn.is_horn
    assert result.horn.violating_indices == [1]


def test_as_latex():
    displays = pipeline(r'\forall x \exists y. P(x, y)').as_latex()
    assert list(displays) == [
        'original', 'no_imp_iff', 'nnf', 'standardized', 'prenex', 'pcnf',
        'pdnf', 'skolem', 'clauses']
    assert displays['prenex'] == \
        '\\forall\\, x1\\, \\exists\\, y1\\; P\\left(x1,\\,y1\\right)'
    assert displays['clauses'] == '1.\\;\\{ P(x1,sk_f1(x1)) \\}'
    for key in ('original', 'no_imp_iff', 'nnf', 'standardized', 'prenex', 'skolem'):
        parse(displays[key])


def test_runs_are_independent():
    text = r'\exists x P(x) \land \exists x Q(x)'
    assert pipeline(text) == pipeline(text)
    assert pipeline(text).skolem.matrix == parse('P(sk_c1) ∧ Q(sk_c2)')


def test_errors_abort_the_run():
    with pytest.raises(TokenizeError):
        pipeline(r'P \foo')
    with pytest.raises(ParseError):
        pipeline('P Q')


def test_deeply_nested_input_is_an_input_error():
    text = r' \land '.join(f'P{i}' for i in range(5000))
    with pytest.raises(NoTraceException, match='nested too deeply'):
        pipeline(text)
    assert logger.level == logging.WARNING


def test_options():
    with pytest.raises(TypeError):
        pipeline('P', workers=2)
    with pytest.raises(ValueError):
        pipeline('P', log_level='debug')


def test_instance_attributes():
    nfp = NormalFormPipeline()
    result = nfp('P', log_level=logging.INFO)
    assert nfp.result is result
    assert nfp.options.log_level == logging.INFO
    assert nfp.time_total >= 0.0


def test_logging():
    handler = ListHandler()
    logger.addHandler(handler)
    level = logger.level
    try:
        pipeline(r'\forall x P(x)', log_level=logging.DEBUG)
    finally:
        logger.removeHandler(handler)
    assert logger.level == level
    assert 'finished' in handler.messages
    assert 'prefix: ∀x1' in handler.messages
    assert any(message.startswith('cnf: depth 0') for message in handler.messages)


def test_no_logging_by_default():
    handler = ListHandler()
    logger.addHandler(handler)
    try:
        pipeline(r'\forall x P(x)')
    finally:
        logger.removeHandler(handler)
    assert handler.messages == []
