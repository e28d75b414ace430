r"""A recursive descent parser for first-order formulas.

The grammar uses one token of lookahead. Precedences from low to high are

    ``IFF < IMP < OR < AND < unary < primary``,

and all binary operators associate to the left. The scope of a quantifier is
either a parenthesized formula or a single unary formula:

>>> parse(r'\forall x P(x) \land Q(x)')
And(All(x, P(x)), Q(x))
>>> parse(r'\forall x (P(x) \land Q(x))')
All(x, And(P(x), Q(x)))
>>> parse('P -> Q -> R')
Implies(Implies(P, Q), R)
>>> parse(r'\exists x, y: f(x) \neq g(x, y)')
Ex(x, Ex(y, f(x) != g(x, y)))
"""

from __future__ import annotations

from typing import Optional

from ..firstorder import (All, And, Eq, Equivalent, Ex, Formula, function_app,
                          Implies, Ne, Not, Or, Pred, Term, Variable)
from ..support.excepthook import NoTraceException
from .tokenizer import Token, TokenKind, tokenize


class ParseError(NoTraceException):
    """The token sequence is not a formula.
    """

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(f'{message} at position {pos}')
        self.message = message
        self.pos = pos


BINARY_OPERATORS = (
    (TokenKind.IFF, Equivalent),
    (TokenKind.IMP, Implies),
    (TokenKind.OR, Or),
    (TokenKind.AND, And))
"""Binary operators with increasing precedence.
"""


class Parser:
    """A parser for one token sequence. Use :func:`parse` instead of
    instantiating this class.
    """

    def __init__(self, tokens: list[Token]) -> None:
        assert tokens and tokens[-1].kind is TokenKind.EOF
        self.tokens = tokens
        self.index = 0

    def parse(self) -> Formula:
        f = self.formula()
        token = self.peek()
        if token.kind is not TokenKind.EOF:
            raise ParseError(f'unexpected {describe(token)} after complete formula',
                             token.pos)
        return f

    def advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind is not TokenKind.EOF:
            self.index += 1
        return token

    def expect(self, kind: TokenKind) -> Token:
        token = self.peek()
        if token.kind is not kind:
            raise ParseError(f'expected {kind.name} but found {describe(token)}', token.pos)
        return self.advance()

    def peek(self) -> Token:
        return self.tokens[self.index]

    def formula(self, level: int = 0) -> Formula:
        """Parse a formula whose toplevel operator has at least the precedence
        of ``BINARY_OPERATORS[level]``.
        """
        if level == len(BINARY_OPERATORS):
            return self.unary()
        kind, op = BINARY_OPERATORS[level]
        f = self.formula(level + 1)
        while self.peek().kind is kind:
            self.advance()
            f = op(f, self.formula(level + 1))
        return f

    def unary(self) -> Formula:
        token = self.peek()
        match token.kind:
            case TokenKind.NOT:
                self.advance()
                return Not(self.unary())
            case TokenKind.FORALL | TokenKind.EXISTS:
                self.advance()
                q = All if token.kind is TokenKind.FORALL else Ex
                vars_ = [Variable(self.expect(TokenKind.ID).value)]
                while self.peek().kind is TokenKind.COMMA:
                    self.advance()
                    vars_.append(Variable(self.expect(TokenKind.ID).value))
                if self.peek().kind is TokenKind.DOT:
                    self.advance()
                # A parenthesized scope is a primary formula.
                return q(vars_, self.unary())
            case TokenKind.LP:
                self.advance()
                f = self.formula()
                self.expect(TokenKind.RP)
                return f
            case TokenKind.ID:
                return self.atom()
            case _:
                raise ParseError(f'unexpected {describe(token)}', token.pos)

    def atom(self) -> Formula:
        """Parse an equation, an inequation, or a predicate application. For
        the former two, we speculatively read a term and check for ``=`` or
        ``≠``. Otherwise, we restore the position and read a predicate.
        """
        saved_index = self.index
        lhs = self.maybe_term()
        if lhs is not None:
            match self.peek().kind:
                case TokenKind.EQ:
                    self.advance()
                    return Eq(lhs, self.term())
                case TokenKind.NEQ:
                    self.advance()
                    return Ne(lhs, self.term())
        self.index = saved_index
        name = self.expect(TokenKind.ID).value
        assert name is not None
        if self.peek().kind is not TokenKind.LP:
            return Pred(name)
        self.advance()
        args = []
        if self.peek().kind is not TokenKind.RP:
            args.append(self.term())
            while self.peek().kind is TokenKind.COMMA:
                self.advance()
                args.append(self.term())
        self.expect(TokenKind.RP)
        return Pred(name, args)

    def maybe_term(self) -> Optional[Term]:
        """Try to parse a term. On failure, return :obj:`None`. The position
        is undefined then and must be restored by the caller.
        """
        token = self.peek()
        if token.kind is not TokenKind.ID:
            return None
        self.advance()
        if self.peek().kind is not TokenKind.LP:
            return Variable(token.value)
        self.advance()
        args = []
        if self.peek().kind is not TokenKind.RP:
            while True:
                arg = self.maybe_term()
                if arg is None:
                    return None
                args.append(arg)
                if self.peek().kind is not TokenKind.COMMA:
                    break
                self.advance()
        if self.peek().kind is not TokenKind.RP:
            return None
        self.advance()
        return make_term(token.value, args)

    def term(self) -> Term:
        name = self.expect(TokenKind.ID).value
        if self.peek().kind is not TokenKind.LP:
            return Variable(name)
        self.advance()
        args = []
        if self.peek().kind is not TokenKind.RP:
            args.append(self.term())
            while self.peek().kind is TokenKind.COMMA:
                self.advance()
                args.append(self.term())
        self.expect(TokenKind.RP)
        return make_term(name, args)


def describe(token: Token) -> str:
    match token.kind:
        case TokenKind.ID:
            return f'identifier {token.value!r}'
        case TokenKind.EOF:
            return 'end of input'
        case _:
            return token.kind.name


def make_term(name: str, args: list[Term]) -> Term:
    # An application without arguments is a constant.
    if not args:
        return Variable(name)
    return function_app(name, args)


def parse(text: str) -> Formula:
    r"""Parse `text` into a formula. Raises :exc:`.tokenizer.TokenizeError` or
    :exc:`ParseError` on failure.

    >>> parse(r'P(x) \to Q(x)')
    Implies(P(x), Q(x))
    >>> parse('P(x) Q(x)')
    Traceback (most recent call last):
    ...
    folnf.syntax.parser.ParseError: unexpected identifier 'Q' after complete formula at position 5
    """
    return Parser(tokenize(text)).parse()
