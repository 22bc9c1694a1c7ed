from dataclasses import dataclass

# ----------------------- limits -----------------------
VAR_MAX = 64 # distinct variables per registry lifetime (one uint64 bitmask)
STACK_MAX = 128 # slots in the parser side-stack and in the evaluation stack
DEFAULT_MAX_TABLE_VARS = 20 # 2**20 rows
MAX_TABLE_VARS_LIMIT = 32
CHUNK_ROWS = 1 << 16 # rows enumerated per numpy chunk
ORDER_MARKER = '/'
ALPHABETS = {
    'letters': 'FT',
    'digits': '01',
}
# ------------------------------------------------------

@dataclass(frozen=True)
class Config:
    '''
    Runtime options chosen on the command line.

    Attributes:
        alphabet (str): two symbols, false first, used to render truth values;
        max_table_vars (int): largest number of variables a table may have;
        show_header (bool): print the row of variable names above each table.
    '''
    alphabet: str = ALPHABETS['letters']
    max_table_vars: int = DEFAULT_MAX_TABLE_VARS
    show_header: bool = True

    def __post_init__(self):
        if len(self.alphabet) != 2:
            raise ValueError(f"alphabet must have exactly 2 symbols, got {self.alphabet!r}")
        if not 1 <= self.max_table_vars <= MAX_TABLE_VARS_LIMIT:
            raise ValueError(f"max_table_vars must be between 1 and {MAX_TABLE_VARS_LIMIT}")
