import logging

import numpy as np

from .config import CHUNK_ROWS, Config
from .errors import TableTooLargeError
from .evaluator import evaluate, variable_bit

log = logging.getLogger(__name__)


def gen_assignments(num_vars, chunk_rows=CHUNK_ROWS):
    '''
    Generates the truth assignments of the table rows, from all true down to
    all false, in chunks.

    Rows count down from 2**num_vars - 1 to 0 with the first column as the most
    significant bit of the counter; the assignments themselves keep variable id k
    at bit k.

    Args:
        num_vars (int): number of variables;
        chunk_rows (int): maximum number of rows per chunk.

    Returns:
        generator of np.array(dtype=np.uint64).
    '''
    hi = 1 << num_vars
    while hi > 0:
        lo = max(hi - chunk_rows, 0)
        rows = np.arange(lo, hi, dtype=np.uint64)[::-1]
        yield row_assignments(rows, num_vars)
        hi = lo


def row_assignments(rows, num_vars):
    masks = np.zeros_like(rows)
    for var_id in range(num_vars):
        masks |= variable_bit(rows, num_vars - 1 - var_id) << np.uint64(var_id)
    return masks


def format_header(expr):
    return ''.join(name + ' ' for name in expr.names) + ' ' + expr.text


def format_rows(expr, masks, results, alphabet):
    '''
    Renders one chunk of rows.

    Args:
        expr (Expression): expression the rows belong to;
        masks (np.array(dtype=np.uint64)): truth assignments of the chunk;
        results (np.array): 0/1 value of expr for each assignment;
        alphabet (str): false and true symbols.

    Returns:
        list(str): one line per assignment.
    '''
    symbols = np.array(list(alphabet))
    lines = np.full(masks.shape, '', dtype=object)
    for var_id, name in enumerate(expr.names):
        column = symbols[variable_bit(masks, var_id)]
        lines = lines + np.char.ljust(column, len(name)).astype(object) + ' '
    results = np.broadcast_to(results, masks.shape)
    lines = lines + ' ' + symbols[results].astype(object)
    return lines.tolist()


def build_table(expr, config=None):
    '''
    Generates the lines of the truth table of expr: the header (unless disabled)
    followed by one row per truth assignment.

    Nothing is generated when the expression is structurally broken or too
    large: the error is raised before the first line.

    Args:
        expr (Expression): parsed expression;
        config (Config): output options.

    Returns:
        generator of str.

    Raises:
        TableTooLargeError, StackOverflowError, StackUnderflowError, MalformedExpressionError.
    '''
    if config is None:
        config = Config()
    if expr.num_vars > config.max_table_vars:
        raise TableTooLargeError(expr.num_vars, config.max_table_vars)

    evaluate(expr, 0) # probe, fails before anything is printed

    log.debug("%d variables, %d rows", expr.num_vars, 1 << expr.num_vars)
    if config.show_header:
        yield format_header(expr)
    for masks in gen_assignments(expr.num_vars):
        results = evaluate(expr, masks)
        yield from format_rows(expr, masks, results, config.alphabet)
