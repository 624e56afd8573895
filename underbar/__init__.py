r"""
'                 _           _
'   _  _ _ _  __| |___ _ _ | |__  __ _ _ _
'  | || | ' \/ _` / -_) '_|| '_ \/ _` | '_|
'   \_,_|_||_\__,_\___|_|  |_.__/\__,_|_|
'
'  import underbar as _
"""

# expose the iteration primitive and its helpers
from .engine import each, view_of, strict_equal, CollectionView, IndexedView, KeyedView

# expose the collection operations
from .extensions.search import index_of, contains
from .extensions.transform import filter, reject, uniq, map, pluck
from .extensions.reduction import reduce, every, some
from .extensions.structural import flatten, zip, intersection, difference
from .extensions.misc import (
    identity,
    first,
    last,
    extend,
    defaults,
    invoke,
    shuffle,
    sort_by
)

# expose the function combinators
from .extensions.functions import once, memoize, delay, throttle

# expose timers, configuration and errors
from .timers import Scheduler, ThreadTimerScheduler, EventLoopScheduler, VirtualScheduler
from .config import UnderbarConfig, get_config, configure, reset_config
from .errors import UnderbarError, UnsupportedCollectionError, EmptyReductionError

# define what `import *` does; filter, map and zip are left out on purpose
# so a star import never shadows the builtins
__all__ = [
    "each",
    "index_of",
    "contains",
    "reject",
    "uniq",
    "pluck",
    "reduce",
    "every",
    "some",
    "flatten",
    "intersection",
    "difference",
    "identity",
    "first",
    "last",
    "extend",
    "defaults",
    "invoke",
    "shuffle",
    "sort_by",
    "once",
    "memoize",
    "delay",
    "throttle",
    "view_of",
    "strict_equal",
    "CollectionView",
    "IndexedView",
    "KeyedView",
    "Scheduler",
    "ThreadTimerScheduler",
    "EventLoopScheduler",
    "VirtualScheduler",
    "UnderbarConfig",
    "get_config",
    "configure",
    "reset_config",
    "UnderbarError",
    "UnsupportedCollectionError",
    "EmptyReductionError"
]
