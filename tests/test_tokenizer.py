import pytest

from folnf.syntax import Token, TokenizeError, TokenKind, tokenize


def kinds(text):
    return [token.kind for token in tokenize(text)]


@pytest.mark.parametrize('text, kind', [
    (r'\forall', TokenKind.FORALL), ('∀', TokenKind.FORALL),
    (r'\exists', TokenKind.EXISTS), ('∃', TokenKind.EXISTS),
    (r'\neg', TokenKind.NOT), (r'\lnot', TokenKind.NOT), ('¬', TokenKind.NOT),
    ('~', TokenKind.NOT),
    (r'\land', TokenKind.AND), (r'\wedge', TokenKind.AND), ('∧', TokenKind.AND),
    (r'\lor', TokenKind.OR), (r'\vee', TokenKind.OR), ('∨', TokenKind.OR),
    (r'\rightarrow', TokenKind.IMP), (r'\to', TokenKind.IMP),
    (r'\Rightarrow', TokenKind.IMP), (r'\implies', TokenKind.IMP),
    ('->', TokenKind.IMP), ('→', TokenKind.IMP), ('⇒', TokenKind.IMP),
    (r'\leftrightarrow', TokenKind.IFF), (r'\iff', TokenKind.IFF),
    (r'\Leftrightarrow', TokenKind.IFF), ('<->', TokenKind.IFF),
    ('↔', TokenKind.IFF), ('⇔', TokenKind.IFF),
    ('=', TokenKind.EQ), (r'\neq', TokenKind.NEQ), (r'\ne', TokenKind.NEQ),
    ('≠', TokenKind.NEQ),
    (',', TokenKind.COMMA), ('.', TokenKind.DOT), (':', TokenKind.DOT)])
def test_aliases(text, kind):
    assert kinds(text) == [kind, TokenKind.EOF]


def test_brackets_are_folded():
    assert kinds(r'( [ { \{ ) ] } \}') == [TokenKind.LP] * 4 + [TokenKind.RP] * 4 + [TokenKind.EOF]


def test_arrows_before_single_characters():
    assert kinds('P<->Q->R') == [
        TokenKind.ID, TokenKind.IFF, TokenKind.ID, TokenKind.IMP, TokenKind.ID, TokenKind.EOF]


def test_comments_and_spaces_are_skipped():
    assert kinds('P % a comment \\foo\n  \\land Q') == [
        TokenKind.ID, TokenKind.AND, TokenKind.ID, TokenKind.EOF]


def test_comment_at_end_of_input():
    assert kinds('P % no newline') == [TokenKind.ID, TokenKind.EOF]


def test_formatting_commands_are_skipped():
    tokens = tokenize(r'\left( P \right) \quad \text{and} \land \mathrm{Q} R \, \; \: \!')
    assert [str(t) for t in tokens] == ['LP', 'ID P', 'RP', 'AND', 'ID R', 'EOF']


def test_nested_group_is_skipped():
    assert kinds(r'\color{red{ish}}P') == [TokenKind.ID, TokenKind.EOF]


def test_identifiers():
    tokens = tokenize('Pé_1(x0, _y)')
    assert [t.value for t in tokens if t.kind is TokenKind.ID] == ['Pé_1', 'x0', '_y']


def test_positions():
    assert tokenize('  P -> Q') == [
        Token(TokenKind.ID, 'P', 2),
        Token(TokenKind.IMP, None, 4),
        Token(TokenKind.ID, 'Q', 7),
        Token(TokenKind.EOF, None, 8)]


def test_empty_input():
    assert tokenize('') == [Token(TokenKind.EOF, pos=0)]


def test_unknown_command_is_named():
    with pytest.raises(TokenizeError) as exc_info:
        tokenize(r'P \land \foo Q')
    assert exc_info.value.fragment == r'\foo'
    assert exc_info.value.pos == 8
    assert r'\foo' in str(exc_info.value)


def test_command_names_are_read_completely():
    # \to is an alias, but \top is not.
    with pytest.raises(TokenizeError) as exc_info:
        tokenize(r'P \top')
    assert exc_info.value.fragment == r'\top'


@pytest.mark.parametrize('text, fragment, pos', [
    ('P # Q', '#', 2),
    ('P - Q', '-', 2),
    ('P < Q', '<', 2),
    ('3', '3', 0),
    ('P \\', '\\', 2),
    (r'P \(', r'\(', 2)])
def test_unrecognized_input(text, fragment, pos):
    with pytest.raises(TokenizeError) as exc_info:
        tokenize(text)
    assert exc_info.value.fragment == fragment
    assert exc_info.value.pos == pos


def test_unterminated_group():
    with pytest.raises(TokenizeError) as exc_info:
        tokenize(r'\text{P \land Q')
    assert exc_info.value.pos == 5
