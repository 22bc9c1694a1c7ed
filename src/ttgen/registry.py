from .config import VAR_MAX
from .errors import VariableCapacityError


class VariableRegistry():
    '''
    Maps variable names to dense ids in order of first appearance.

    Id k is bit k of a truth assignment, so ids never exceed capacity - 1.
    '''

    def __init__(self, names=(), capacity=VAR_MAX):
        self.capacity = capacity
        self._ids = {} # name(str): id(int)
        self._names = [] # id -> name
        for name in names:
            self.lookup_or_insert(name)

    def lookup_or_insert(self, name):
        '''
        Returns the id of name, registering it first if it is new.

        Args:
            name (str): variable name.

        Returns:
            int: id in [0, capacity).

        Raises:
            VariableCapacityError: name is new and the registry is full.
        '''
        var_id = self._ids.get(name)
        if var_id is not None:
            return var_id
        if len(self._names) >= self.capacity:
            raise VariableCapacityError(self.capacity)
        var_id = len(self._names)
        self._ids[name] = var_id
        self._names.append(name)
        return var_id

    def lookup(self, name):
        return self._ids.get(name)

    def clear(self):
        self._ids.clear()
        self._names.clear()

    def copy(self):
        return VariableRegistry(self._names, self.capacity)

    @property
    def names(self):
        return tuple(self._names)

    def __len__(self):
        return len(self._names)

    def __contains__(self, name):
        return name in self._ids
