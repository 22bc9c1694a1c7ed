import logging
import sys

from .config import Config
from .errors import LineError
from .expression import Directive
from .parser import parse_line
from .registry import VariableRegistry
from .table import build_table

log = logging.getLogger(__name__)


class Session():
    '''
    Drives the pipeline line by line and owns the only state that outlives a
    line: the column order declared by the latest variable order line.

    Every expression line parses against a fresh copy of that order, so names
    it introduces are forgotten once its table is printed.
    '''

    def __init__(self, config=None, out=None, err=None):
        self.config = config if config is not None else Config()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.order = VariableRegistry() # declared column order
        self.errors = 0 # lines rejected so far

    def process_line(self, line, source='<stdin>', line_number=0):
        '''
        Prints the table for one line, or a diagnostic if the line is rejected.

        Args:
            line (str): raw input line;
            source (str): input name used in diagnostics;
            line_number (int): 1-based line number used in diagnostics.

        Returns:
            bool: True if the line was accepted.

        Raises:
            VariableCapacityError: left to the caller, it ends the run.
        '''
        if not line.strip():
            return True

        try:
            result = parse_line(line, self.order.copy())
            if isinstance(result, Directive):
                self.order = result.registry
            else:
                # build_table raises before its first line, so no partial table
                for row in build_table(result, self.config):
                    self.out.write(row + '\n')
        except LineError as error:
            self.errors += 1
            log.debug("%s:%d rejected: %r", source, line_number, line)
            print(f"{source}:{line_number}: error: {error}", file=self.err)
            self.out.write('\n')
            return False
        self.out.write('\n')
        return True

    def run(self, lines, source='<stdin>'):
        '''
        Processes every line of an iterable of lines (e.g. an open file).

        Returns:
            int: number of lines rejected.
        '''
        rejected = 0
        for line_number, line in enumerate(lines, 1):
            if not self.process_line(line, source, line_number):
                rejected += 1
        return rejected
