import numpy as np

from .config import STACK_MAX
from .errors import MalformedExpressionError, StackOverflowError, StackUnderflowError
from .expression import NodeKind
from .operators import negate


def variable_bit(bits, var_id):
    '''
    Extracts the value of variable var_id from one or many truth assignments.

    Args:
        bits (int or np.array(dtype=np.uint64)): assignment bitmask(s);
        var_id (int): variable id, i.e. bit position.

    Returns:
        int or np.array(dtype=np.uint64): 0/1 value(s).
    '''
    if isinstance(bits, np.ndarray):
        return (bits >> np.uint64(var_id)) & np.uint64(1)
    return (bits >> var_id) & 1


def evaluate(expr, bits, stack_max=STACK_MAX):
    '''
    Runs the postfix program of expr against truth assignment(s) bits.

    Passing a numpy array evaluates every assignment in it in one walk.
    Structural failures do not depend on bits.

    Args:
        expr (Expression): parsed expression;
        bits (int or np.array(dtype=np.uint64)): assignment bitmask(s);
        stack_max (int): evaluation stack capacity.

    Returns:
        int or np.array: 0/1 result(s).

    Raises:
        StackOverflowError, StackUnderflowError, MalformedExpressionError.
    '''
    stack = []

    for node in expr.nodes:
        if node.kind == NodeKind.VARIABLE:
            if len(stack) >= stack_max:
                raise StackOverflowError()
            stack.append(variable_bit(bits, node.var_id))
            continue

        if len(stack) < node.arity:
            raise StackUnderflowError()
        if node.kind == NodeKind.OPERATOR:
            b = stack.pop() # right operand
            a = stack.pop()
            stack.append(node.operator.apply(a, b))
        else: # NOT
            stack.append(negate(stack.pop()))

    if len(stack) != 1:
        raise MalformedExpressionError(len(stack))
    return stack[0]
