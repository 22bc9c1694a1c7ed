'''
Static operator table.

Every binary rule works on 0/1 values with bitwise arithmetic only, so the same
function serves a single assignment (python int) and a whole numpy column of
assignments at once.
'''

from enum import Enum


class Operator(Enum):

    def __new__(cls, names, symbol, rule):
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__)
        obj.names = names # case-insensitive spellings, canonical first
        obj.symbol = symbol # symbolic short form, '' if none
        obj.rule = rule
        return obj

    def __str__(self):
        return self.names[0]

    def apply(self, a, b):
        '''
        Applies the binary rule to a (left operand) and b (right operand).

        Args:
            a (int or np.array): left operand, 0/1 values;
            b (int or np.array): right operand, 0/1 values.

        Returns:
            int or np.array: 0/1 result(s).
        '''
        return self.rule(a, b)

    OR = ('OR',), '|', lambda a, b: a | b
    AND = ('AND',), '&', lambda a, b: a & b
    XOR = ('XOR',), '^', lambda a, b: a ^ b
    NAND = ('NAND',), '', lambda a, b: 1 ^ (a & b)
    NOR = ('NOR',), '', lambda a, b: 1 ^ (a | b)
    IMPLIES = ('IMPLIES', 'IMP'), '->', lambda a, b: (1 ^ a) | b
    EQUIV = ('EQUIV', 'EQU'), '=', lambda a, b: 1 ^ (a ^ b)


NOT_WORD = 'NOT'
NOT_SYMBOL = '!'

# name (upper case) -> operator
OPERATOR_NAMES = {name: op for op in Operator for name in op.names}

# symbolic forms, longest first so that '->' is tried before any one-char form
OPERATOR_SYMBOLS = sorted(
    ((op.symbol, op) for op in Operator if op.symbol),
    key=lambda item: len(item[0]),
    reverse=True,
)


def lookup_name(word):
    '''
    Resolves a word to an operator, ignoring case.

    Args:
        word (str): candidate operator name.

    Returns:
        Operator or None.
    '''
    return OPERATOR_NAMES.get(word.upper())


def negate(a):
    return 1 ^ a
