from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .operators import NOT_WORD, Operator
from .registry import VariableRegistry


class NodeKind(Enum):
    VARIABLE = 0
    OPERATOR = 1
    NOT = 2


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    var_id: Optional[int] = None
    operator: Optional[Operator] = None

    @property
    def arity(self):
        return {NodeKind.VARIABLE: 0, NodeKind.OPERATOR: 2, NodeKind.NOT: 1}[self.kind]


@dataclass(frozen=True)
class Expression:
    '''
    A parsed expression as a postfix program.

    Attributes:
        nodes (tuple(Node)): postfix program, operands before their operator;
        names (tuple(str)): variable names indexed by id, i.e. the column order;
        text (str): the source line the program was parsed from.
    '''
    nodes: Tuple[Node, ...]
    names: Tuple[str, ...]
    text: str = ''

    @property
    def num_vars(self):
        return len(self.names)

    def postfix(self):
        '''
        Renders the program in reverse polish notation, e.g. "A B AND".
        '''
        words = []
        for node in self.nodes:
            if node.kind == NodeKind.VARIABLE:
                words.append(self.names[node.var_id])
            elif node.kind == NodeKind.OPERATOR:
                words.append(str(node.operator))
            else:
                words.append(NOT_WORD)
        return ' '.join(words)


@dataclass(frozen=True)
class Directive:
    '''
    A variable order line: the names, in column order, for the lines that follow.
    '''
    registry: VariableRegistry

    @property
    def names(self):
        return self.registry.names
