"""Reading formulas from text.
"""

from .tokenizer import Token, TokenKind, TokenizeError, Tokenizer, tokenize  # noqa

from .parser import Parser, ParseError, parse  # noqa
