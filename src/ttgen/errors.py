'''
Error kinds raised while reading, parsing and evaluating one input line.

Everything derived from LineError only spoils the current line. VariableCapacityError
is the single fatal kind: the registry has no eviction policy, so the caller is
expected to stop the whole run.
'''

from .config import VAR_MAX


class TruthTableError(Exception):
    pass


class LineError(TruthTableError):
    pass


class UnexpectedCharacterError(LineError):
    def __init__(self, char):
        shown = f"'{char}'" if char.isprintable() else repr(char)
        super().__init__(f"unexpected character {shown}")
        self.char = char


class MismatchedParenthesesError(LineError):
    def __init__(self):
        super().__init__("mismatched parentheses")


class EmbeddedOrderMarkerError(LineError):
    def __init__(self):
        super().__init__("variable order marker can not be embedded in an expression")


class NonVariableInOrderError(LineError):
    def __init__(self, text):
        super().__init__(f'non-variable "{text}" in variable order line')
        self.text = text


class StackOverflowError(LineError):
    def __init__(self):
        super().__init__("stack overflow")


class StackUnderflowError(LineError):
    def __init__(self):
        super().__init__("stack underflow")


class MalformedExpressionError(LineError):
    def __init__(self, left):
        super().__init__(f"malformed expression: {left} values left on stack")
        self.left = left


class TableTooLargeError(LineError):
    def __init__(self, num_vars, limit):
        super().__init__(f"table too large: {num_vars} variables (limit {limit})")
        self.num_vars = num_vars
        self.limit = limit


class VariableCapacityError(TruthTableError):
    def __init__(self, capacity=VAR_MAX):
        super().__init__(f"maximum of {capacity} variables")
        self.capacity = capacity
