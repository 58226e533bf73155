from . import operator  # noqa
from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .maybe import *  # noqa

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
