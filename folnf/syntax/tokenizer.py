r"""A tokenizer for first-order formulas in a forgiving LaTeX-like notation.

Connectives and quantifiers can be written as LaTeX commands, as Unicode
symbols, or with ASCII shortcuts. Round, square, and curly brackets are all
equivalent. Pure formatting commands like ``\left`` or ``\text{...}`` are
ignored, so that the display notation produced by
:meth:`.Formula.as_latex` can be read back.

>>> for token in tokenize(r'\forall x\, (P(x) \to Q)'):
...     print(token)
FORALL
ID x
LP
ID P
LP
ID x
RP
IMP
ID Q
RP
EOF
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import auto, Enum
import re
from typing import Final, Optional

from ..support.excepthook import NoTraceException


class TokenKind(Enum):
    FORALL = auto()
    EXISTS = auto()
    NOT = auto()
    AND = auto()
    OR = auto()
    IMP = auto()
    IFF = auto()
    EQ = auto()
    NEQ = auto()
    LP = auto()
    RP = auto()
    COMMA = auto()
    DOT = auto()
    ID = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A token with its kind, its value, and its offset in the input text.
    Only identifiers have a value.
    """

    kind: TokenKind
    value: Optional[str] = None
    pos: int = 0

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.name
        return f'{self.kind.name} {self.value}'


class TokenizeError(NoTraceException):
    """The input contains a character sequence that is not a token.
    """

    def __init__(self, fragment: str, pos: int, reason: str = 'unrecognized input') -> None:
        super().__init__(f'{reason} {fragment!r} at position {pos}')
        self.fragment = fragment
        self.pos = pos


COMMANDS: Final = {
    'forall': TokenKind.FORALL,
    'exists': TokenKind.EXISTS,
    'neg': TokenKind.NOT, 'lnot': TokenKind.NOT,
    'land': TokenKind.AND, 'wedge': TokenKind.AND,
    'lor': TokenKind.OR, 'vee': TokenKind.OR,
    'rightarrow': TokenKind.IMP, 'to': TokenKind.IMP,
    'Rightarrow': TokenKind.IMP, 'implies': TokenKind.IMP,
    'leftrightarrow': TokenKind.IFF, 'iff': TokenKind.IFF,
    'Leftrightarrow': TokenKind.IFF,
    'neq': TokenKind.NEQ, 'ne': TokenKind.NEQ}
"""LaTeX commands for connectives and quantifiers, without the backslash.
"""

FORMATTING_COMMANDS: Final = frozenset({
    'left', 'right', 'big', 'Big', 'bigg', 'Bigg', 'quad', 'qquad', 'enspace',
    'hspace', 'vspace', 'text', 'mathrm', 'operatorname', 'mathbf', 'mathit',
    'mathsf', 'mathtt', 'color'})
"""LaTeX commands that are skipped, together with an immediately following
brace group.
"""

SPACING_COMMANDS: Final = frozenset({'\\,', '\\;', '\\:', '\\!'})

SYMBOLS: Final = {
    '(': TokenKind.LP, '[': TokenKind.LP, '{': TokenKind.LP,
    ')': TokenKind.RP, ']': TokenKind.RP, '}': TokenKind.RP,
    ',': TokenKind.COMMA, '.': TokenKind.DOT, ':': TokenKind.DOT,
    '∀': TokenKind.FORALL, '∃': TokenKind.EXISTS,
    '¬': TokenKind.NOT, '~': TokenKind.NOT,
    '∧': TokenKind.AND, '∨': TokenKind.OR,
    '→': TokenKind.IMP, '⇒': TokenKind.IMP,
    '↔': TokenKind.IFF, '⇔': TokenKind.IFF,
    '=': TokenKind.EQ, '≠': TokenKind.NEQ}
"""Single characters that are tokens of their own.
"""

ESCAPED_BRACES: Final = {'\\{': TokenKind.LP, '\\}': TokenKind.RP}

ARROWS: Final = {'<->': TokenKind.IFF, '->': TokenKind.IMP}

COMMAND_NAME: Final = re.compile('[A-Za-z]+')

IDENTIFIER: Final = re.compile('[A-Za-z_][A-Za-z0-9_\u00C0-\u017F]*')


class Tokenizer:
    """Split a string into a list of tokens. The list always ends with a
    single :attr:`TokenKind.EOF` token. On failure, :exc:`TokenizeError` is
    raised and no tokens are returned.
    """

    def __call__(self, text: str) -> list[Token]:
        self.text = text
        self.pos = 0
        tokens: list[Token] = []
        while self.pos < len(text):
            token = self.next_token()
            if token is not None:
                tokens.append(token)
        tokens.append(Token(TokenKind.EOF, pos=len(text)))
        return tokens

    def next_token(self) -> Optional[Token]:
        """Scan the text at the current position. Return the next token, or
        :obj:`None` when only comments, spaces, or formatting have been
        consumed.
        """
        text, start = self.text, self.pos
        c = text[start]
        if c == '%':
            end = text.find('\n', start)
            self.pos = len(text) if end == -1 else end
            return None
        if c.isspace():
            self.pos += 1
            return None
        if c in '()[]{},.:':
            self.pos += 1
            return Token(SYMBOLS[c], pos=start)
        for arrow, kind in ARROWS.items():
            if text.startswith(arrow, start):
                self.pos += len(arrow)
                return Token(kind, pos=start)
        if c == '\\':
            return self.command()
        if c in SYMBOLS:
            self.pos += 1
            return Token(SYMBOLS[c], pos=start)
        match = IDENTIFIER.match(text, start)
        if match:
            self.pos = match.end()
            return Token(TokenKind.ID, match.group(), pos=start)
        raise TokenizeError(c, start)

    def command(self) -> Optional[Token]:
        text, start = self.text, self.pos
        two = text[start:start + 2]
        if two in SPACING_COMMANDS:
            self.pos += 2
            return None
        if two in ESCAPED_BRACES:
            self.pos += 2
            return Token(ESCAPED_BRACES[two], pos=start)
        match = COMMAND_NAME.match(text, start + 1)
        if not match:
            raise TokenizeError(two, start, reason='unknown command')
        name = match.group()
        self.pos = match.end()
        if name in COMMANDS:
            return Token(COMMANDS[name], pos=start)
        if name in FORMATTING_COMMANDS:
            if self.pos < len(text) and text[self.pos] == '{':
                self.skip_group()
            return None
        raise TokenizeError(f'\\{name}', start, reason='unknown command')

    def skip_group(self) -> None:
        """Skip a balanced brace group starting at the current position.
        """
        start = self.pos
        depth = 0
        for i in range(start, len(self.text)):
            if self.text[i] == '{':
                depth += 1
            elif self.text[i] == '}':
                depth -= 1
                if depth == 0:
                    self.pos = i + 1
                    return
        raise TokenizeError(self.text[start:start + 12], start, reason='unterminated group')


def tokenize(text: str) -> list[Token]:
    r"""Tokenize `text`.

    >>> [t.kind.name for t in tokenize(r'\exists y \text{ such that } y \ne c')]
    ['EXISTS', 'ID', 'ID', 'NEQ', 'ID', 'EOF']
    >>> tokenize(r'P \foo Q')
    Traceback (most recent call last):
    ...
    folnf.syntax.tokenizer.TokenizeError: unknown command '\\foo' at position 2
    """
    return Tokenizer()(text)
