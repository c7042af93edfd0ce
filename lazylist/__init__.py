from .errors import LazyListError, EmptyListError, OutOfRangeError
from .ord import *
from .node import *
from .generators import *
from .algebra import *
from .sort import *
from .convert import *
