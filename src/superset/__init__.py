from .exceptions import EmptyAccessError, EmptyReduceError
from .superset import SuperSet
