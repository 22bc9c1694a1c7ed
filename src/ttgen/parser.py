'''
Infix to postfix conversion (shunting-yard).

All binary operators share one precedence level and associate to the left; NOT
binds tighter than any of them and parentheses override both. So
"A OR B AND C" is "(A OR B) AND C" and "NOT A AND B" is "(NOT A) AND B".
'''

import logging

from .config import STACK_MAX
from .errors import (
    EmbeddedOrderMarkerError,
    MismatchedParenthesesError,
    NonVariableInOrderError,
    StackOverflowError,
    UnexpectedCharacterError,
)
from .expression import Directive, Expression, Node, NodeKind
from .registry import VariableRegistry
from .tokenizer import TokenKind, Tokenizer

log = logging.getLogger(__name__)


class Parser():

    def __init__(self, line, registry=None, stack_max=STACK_MAX):
        self.line = line
        self.registry = registry if registry is not None else VariableRegistry()
        self.stack_max = stack_max
        self.stack = [] # pending operators, NOTs and left parentheses
        self.nodes = [] # postfix output

    def run(self):
        '''
        Consumes the whole line.

        Returns:
            Expression, or Directive when the line starts with the order marker.

        Raises:
            LineError: the line is not a well formed expression or directive;
            VariableCapacityError: too many distinct variables.
        '''
        tokens = Tokenizer(self.line)
        first = True

        for token in tokens:
            log.debug("token %s %r", token.kind.name, token.text)

            if token.kind == TokenKind.UNKNOWN:
                raise UnexpectedCharacterError(token.text)

            if token.kind == TokenKind.ORDER_MARKER:
                if not first:
                    raise EmbeddedOrderMarkerError()
                return self.parse_order(tokens)
            first = False

            if token.kind == TokenKind.VARIABLE:
                self.output(Node(NodeKind.VARIABLE, var_id=self.registry.lookup_or_insert(token.text)))

            elif token.kind == TokenKind.OPERATOR:
                # equal precedence, left associative: anything pending goes first
                while self.stack and self.stack[-1].kind in (TokenKind.OPERATOR, TokenKind.NOT):
                    self.output_token(self.stack.pop())
                self.push(token)

            elif token.kind in (TokenKind.NOT, TokenKind.LPAREN):
                self.push(token)

            elif token.kind == TokenKind.RPAREN:
                while self.stack and self.stack[-1].kind != TokenKind.LPAREN:
                    self.output_token(self.stack.pop())
                if not self.stack:
                    raise MismatchedParenthesesError()
                self.stack.pop() # discard the matching '('

        while self.stack:
            token = self.stack.pop()
            if token.kind == TokenKind.LPAREN:
                raise MismatchedParenthesesError()
            self.output_token(token)

        expr = Expression(tuple(self.nodes), self.registry.names, self.line.strip())
        log.debug("postfix: %s", expr.postfix())
        return expr

    def parse_order(self, tokens):
        '''
        Reads the rest of a variable order line into a cleared registry.

        Args:
            tokens (Tokenizer): positioned right after the marker.

        Returns:
            Directive.
        '''
        self.registry.clear()
        for token in tokens:
            if token.kind == TokenKind.UNKNOWN:
                raise UnexpectedCharacterError(token.text)
            if token.kind != TokenKind.VARIABLE:
                raise NonVariableInOrderError(token.text)
            self.registry.lookup_or_insert(token.text)
        log.debug("variable order: %s", ' '.join(self.registry.names))
        return Directive(self.registry)

    def push(self, token):
        if len(self.stack) >= self.stack_max:
            raise StackOverflowError()
        self.stack.append(token)

    def output_token(self, token):
        if token.kind == TokenKind.NOT:
            self.output(Node(NodeKind.NOT))
        else:
            self.output(Node(NodeKind.OPERATOR, operator=token.operator))

    def output(self, node):
        self.nodes.append(node)


def parse_line(line, registry=None):
    '''
    Parses one line of input.

    Args:
        line (str): raw input line;
        registry (VariableRegistry): ids already assigned for this line, e.g. a
            declared column order. Defaults to a fresh, empty registry.

    Returns:
        Expression or Directive.
    '''
    return Parser(line, registry).run()
