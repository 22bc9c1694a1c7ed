import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .config import ORDER_MARKER
from .operators import NOT_SYMBOL, NOT_WORD, OPERATOR_SYMBOLS, Operator, lookup_name

WHITESPACE = ' \t\n'
WORD_RE = re.compile(r"[A-Za-z0-9_']+")


class TokenKind(Enum):
    VARIABLE = 'variable'
    OPERATOR = 'operator'
    NOT = 'not'
    LPAREN = '('
    RPAREN = ')'
    ORDER_MARKER = 'order marker'
    UNKNOWN = 'unknown'


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    operator: Optional[Operator] = None


class Tokenizer():
    '''
    Splits one line of input into tokens, one token per call.

    Unknown characters come back as UNKNOWN tokens rather than exceptions;
    deciding what to do with them is up to the parser.
    '''

    def __init__(self, line):
        self.line = line
        self.cursor = 0

    def next_token(self) -> Optional[Token]:
        '''
        Reads the token at the cursor and moves past it.

        Returns:
            Token, or None once only whitespace remains.
        '''
        line = self.line
        length = len(line)

        while self.cursor < length and line[self.cursor] in WHITESPACE: # eat whitespace
            self.cursor += 1
        if self.cursor >= length:
            return None

        start = self.cursor
        c = line[start]

        if c == '(':
            return self._emit(TokenKind.LPAREN, 1)
        if c == ')':
            return self._emit(TokenKind.RPAREN, 1)
        if c == ORDER_MARKER:
            return self._emit(TokenKind.ORDER_MARKER, 1)

        if c == NOT_SYMBOL:
            return self._emit(TokenKind.NOT, 1)
        for symbol, op in OPERATOR_SYMBOLS:
            if line.startswith(symbol, start):
                return self._emit(TokenKind.OPERATOR, len(symbol), op)

        match = WORD_RE.match(line, start)
        if not match: # nothing starts here, hand back the offending character
            return self._emit(TokenKind.UNKNOWN, 1)

        word = match.group()
        if word.upper() == NOT_WORD:
            return self._emit(TokenKind.NOT, len(word))
        op = lookup_name(word)
        if op is not None:
            return self._emit(TokenKind.OPERATOR, len(word), op)
        return self._emit(TokenKind.VARIABLE, len(word))

    def _emit(self, kind, length, op=None):
        text = self.line[self.cursor:self.cursor + length]
        self.cursor += length
        return Token(kind, text, op)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token


def tokenize(line):
    return list(Tokenizer(line))
