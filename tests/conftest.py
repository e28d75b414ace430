import pytest

from folnf import parse

SAMPLES = [
    r'P(x) -> Q(x)',
    r'\forall x \exists y. P(x, y)',
    r'\neg (P \land (Q \lor \neg R))',
    r'\forall x (P(x) <-> \exists y (R(x, y) \land \neg x = y))',
    r'\neg \forall x \exists y (P(x) \to \neg \neg Q(f(x, y)))',
    r'(\exists x P(x) \lor \forall x Q(x)) \land \exists x (R(x) \to S)',
    r'A <-> (B <-> C)',
    r'\forall x, y, z: (x = y \land y = z \to x = z)',
    r'[P(c) \wedge \exists x1 Q(x1, x)] \vee \lnot R(g(c))',
    r'\exists x (x \neq c) \iff \neg \forall y (y = c)',
    r'\forall x (\exists y P(x, y) \land \neg \exists y (Q(y) \lor \forall z R(x, z)))',
    r'¬(A ∧ B) ∨ (C ↔ ¬D) → ∃u ∀v (u = v)',
]


@pytest.fixture(params=SAMPLES)
def sample(request):
    """A parsed sample formula.
    """
    return parse(request.param)


def subformulas(f):
    """All subformulas of `f` including `f`, outside-in.
    """
    yield f
    if not f.is_atomic(f):
        for arg in f.args[1:] if f.is_quantified_formula(f) else f.args:
            yield from subformulas(arg)


@pytest.fixture
def walk():
    return subformulas
