"""ReferenceAdapter abstraction for memexplorer.

The adapter is what lets the explorer stay ignorant of object layout. Given
an object it enumerates the references that object holds, each paired with
the Hop describing where the reference lives. The explorer only ever asks
an adapter for children; how they are discovered is up to the adapter.
"""

import collections
import types
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type

from .chain import Hop


ChildRef = Tuple[Hop, Any]
Handler = Callable[[Any], Iterable[ChildRef]]

_UNSET = object()

# Values that hold no references worth following
_TERMINAL_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    range,
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.CodeType,
)


class ReferenceAdapter(ABC):
    """Abstract adapter enumerating the outgoing references of an object.

    Implementations must:
    - return a finite sequence for every object
    - return nothing for terminal values (objects holding no references)
    - leave out absent references such as None
    - be safe to call on arbitrary object shapes; failures are reported by
      raising, and the explorer wraps them in IntrospectionError
    """

    @abstractmethod
    def get_children(self, obj: Any) -> Iterator[ChildRef]:
        """Get the references held by obj.

        Args:
            obj: The object to introspect

        Returns:
            Iterator of (hop, child) pairs in a deterministic order
        """
        pass

    def is_terminal(self, obj: Any) -> bool:
        """Check if obj can be skipped without calling get_children().

        Default implementation answers False; adapters can override as an
        optimization.
        """
        return False


def _slot_names(cls: type) -> List[str]:
    """Collect instance slot names declared anywhere on the MRO."""
    names = []
    seen = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get('__slots__', ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ('__dict__', '__weakref__') or name in seen:
                continue
            seen.add(name)
            # Private slots are stored under their mangled name
            if name.startswith('__') and not name.endswith('__'):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            names.append(name)
    return names


class PythonObjectAdapter(ReferenceAdapter):
    """Adapter for live Python objects.

    Automatically finds references held by the builtin containers and their
    subclasses (dict, list, tuple, deque, set, frozenset), by instance
    ``__dict__`` attributes and by ``__slots__``. Attributes are reported as
    FIELD hops, followed by the ``__dict__`` table itself as a NAMESPACE hop
    so the table is sized once. Class attributes are never followed; they
    belong to the class, not the instance.

    To follow references of other types, register handlers returning
    (hop, child) pairs; handlers take precedence over the builtin rules:

        adapter = PythonObjectAdapter(handlers={
            Tree: lambda t: ((Hop.custom('node'), n) for n in t.nodes()),
        })
    """

    def __init__(self, handlers: Optional[Dict[Type[Any], Handler]] = None):
        """Initialize the adapter.

        Args:
            handlers: Mapping of type -> function(obj) returning (hop, child)
                pairs. Matched with isinstance() in insertion order.
        """
        self.handlers: Dict[Type[Any], Handler] = dict(handlers or {})
        self._slot_cache: Dict[type, List[str]] = {}

    def register(self, typ: Type[Any], handler: Handler) -> None:
        """Register a handler for typ (and its subclasses)."""
        self.handlers[typ] = handler

    def is_terminal(self, obj: Any) -> bool:
        return isinstance(obj, _TERMINAL_TYPES) and not self._handler_for(obj)

    def _handler_for(self, obj: Any) -> Optional[Handler]:
        for typ, handler in self.handlers.items():
            if isinstance(obj, typ):
                return handler
        return None

    def get_children(self, obj: Any) -> Iterator[ChildRef]:
        handler = self._handler_for(obj)
        if handler is not None:
            refs = list(handler(obj))
        elif isinstance(obj, _TERMINAL_TYPES):
            return iter(())
        else:
            refs = self._builtin_refs(obj)
        return iter([(hop, child) for hop, child in refs if child is not None])

    def _builtin_refs(self, obj: Any) -> List[ChildRef]:
        refs: List[ChildRef] = []

        # Snapshot containers before iterating so a mutation cannot corrupt the walk
        if isinstance(obj, dict):
            for key, value in list(obj.items()):
                refs.append((Hop.key(key), key))
                refs.append((Hop.value(key), value))
        elif isinstance(obj, (list, tuple, collections.deque)):
            refs.extend((Hop.index(i), item) for i, item in enumerate(list(obj)))
        elif isinstance(obj, (set, frozenset)):
            refs.extend((Hop.element(), item) for item in list(obj))

        refs.extend(self._attribute_refs(obj))
        return refs

    def _attribute_refs(self, obj: Any) -> List[ChildRef]:
        refs: List[ChildRef] = []
        cls = type(obj)

        slots = self._slot_cache.get(cls)
        if slots is None:
            slots = self._slot_cache[cls] = _slot_names(cls)
        for name in slots:
            value = getattr(obj, name, _UNSET)
            if value is not _UNSET:
                refs.append((Hop.field(name), value))

        instance_dict = getattr(obj, '__dict__', None)
        if isinstance(instance_dict, dict):
            refs.extend((Hop.field(name), value) for name, value in list(instance_dict.items()))
            # The attribute table is storage of its own, not counted in the owner's size
            refs.append((Hop.namespace(), instance_dict))
        return refs
