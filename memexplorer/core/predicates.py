"""Traversal filters for memexplorer.

Filters are predicates over Chain objects deciding whether the explorer
accepts (visits and may expand) the object at the end of a chain. Simple
filters compose into policies with and/or/not combinators, all of which
short-circuit left to right.
"""

import types
from enum import Enum
from typing import Any, Callable, Dict, Union

from .chain import Chain, HopKind, chain_to_object


class ChainPredicate:
    """Boolean predicate over a Chain with composition helpers.

    Wraps any callable ``Chain -> bool``. Instances compose with
    ``&`` / and_(), ``|`` / or_() and ``~`` / negate().

    Example:
        policy = AtMostOncePredicate() & not_shared_state & object_predicate(keep)
        if policy(chain):
            ...
    """

    def __init__(self, func: Callable[[Chain], bool], name: str = None):
        """Initialize with the function to evaluate.

        Args:
            func: Callable taking a Chain and returning a truthy value
            name: Optional name used in repr()
        """
        self._func = func
        self._name = name or getattr(func, '__name__', func.__class__.__name__)

    def test(self, chain: Chain) -> bool:
        return bool(self._func(chain))

    def __call__(self, chain: Chain) -> bool:
        return self.test(chain)

    def and_(self, other: Callable[[Chain], bool]) -> 'ChainPredicate':
        """Accept only if both accept; other is not evaluated when self rejects."""
        return and_(self, other)

    def or_(self, other: Callable[[Chain], bool]) -> 'ChainPredicate':
        """Accept if either accepts; other is not evaluated when self accepts."""
        return or_(self, other)

    def negate(self) -> 'ChainPredicate':
        return not_(self)

    def __and__(self, other):
        return self.and_(other)

    def __rand__(self, other):
        return and_(other, self)

    def __or__(self, other):
        return self.or_(other)

    def __ror__(self, other):
        return or_(other, self)

    def __invert__(self):
        return self.negate()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._name})"


def as_predicate(func: Union[ChainPredicate, Callable[[Chain], bool]]) -> ChainPredicate:
    """Coerce a plain callable into a ChainPredicate.

    Raises:
        TypeError: If func is not callable
    """
    if isinstance(func, ChainPredicate):
        return func
    if not callable(func):
        raise TypeError(f"Predicate must be callable, got {type(func).__name__}")
    return ChainPredicate(func)


def and_(*predicates: Callable[[Chain], bool]) -> ChainPredicate:
    """Conjunction evaluated left to right, stopping at the first rejection."""
    parts = tuple(as_predicate(p) for p in predicates)

    def _all(chain: Chain) -> bool:
        for predicate in parts:
            if not predicate.test(chain):
                return False
        return True

    return ChainPredicate(_all, " & ".join(p._name for p in parts) or "true")


def or_(*predicates: Callable[[Chain], bool]) -> ChainPredicate:
    """Disjunction evaluated left to right, stopping at the first acceptance."""
    parts = tuple(as_predicate(p) for p in predicates)

    def _any(chain: Chain) -> bool:
        for predicate in parts:
            if predicate.test(chain):
                return True
        return False

    return ChainPredicate(_any, " | ".join(p._name for p in parts) or "false")


def not_(predicate: Callable[[Chain], bool]) -> ChainPredicate:
    """Negation of predicate."""
    inner = as_predicate(predicate)
    return ChainPredicate(lambda chain: not inner.test(chain), f"~{inner._name}")


ACCEPT_ALL = ChainPredicate(lambda chain: True, "accept_all")


class AtMostOncePredicate(ChainPredicate):
    """Accepts each object identity at most once.

    The first chain ending at a given object is accepted and the identity is
    recorded; every later chain ending at the same object is rejected. This
    is what breaks cycles, so it must be the leftmost term of a composed
    filter. Instances are stateful and belong to a single walk.

    Accepted objects are retained until the predicate is discarded, so their
    id() values cannot be recycled for new objects mid-walk.
    """

    def __init__(self):
        super().__init__(self._accept_once, "at_most_once")
        self._seen: Dict[int, Any] = {}

    def _accept_once(self, chain: Chain) -> bool:
        value = chain.value
        key = id(value)
        if key in self._seen:
            return False
        self._seen[key] = value
        return True

    def has_seen(self, obj: Any) -> bool:
        """Check whether obj has already been accepted by this instance."""
        return id(obj) in self._seen

    def __len__(self) -> int:
        return len(self._seen)


# Objects every graph can reach and no graph owns
_SHARED_SINGLETONS = (None, True, False, Ellipsis, NotImplemented)
_SHARED_TYPES = (type, types.ModuleType)


def _not_shared_state(chain: Chain) -> bool:
    """Reject classes, modules, builtin singletons, enum internals and attribute names.

    These are process-wide values reachable from unrelated object graphs.
    Charging them to any one graph would double count them and make
    independent graphs appear connected through shared infrastructure.
    """
    value = chain.value
    if any(value is singleton for singleton in _SHARED_SINGLETONS):
        return False
    if isinstance(value, _SHARED_TYPES):
        return False
    parent = chain.parent
    if parent is None:
        return True
    # Attributes held by enum members belong to the shared constant
    if isinstance(parent.value, Enum):
        return False
    # Attribute names in an instance __dict__ belong to the class
    if chain.hop.kind is HopKind.KEY and parent.hop.kind is HopKind.NAMESPACE:
        return False
    return True


not_shared_state = ChainPredicate(_not_shared_state, "not_shared_state")


def object_predicate(func: Callable[[Any], bool]) -> ChainPredicate:
    """Adapt a predicate over plain objects into a predicate over chains.

    Args:
        func: Callable taking the object at the end of a chain

    Raises:
        TypeError: If func is not callable
    """
    if not callable(func):
        raise TypeError(f"Object predicate must be callable, got {type(func).__name__}")
    return ChainPredicate(
        lambda chain: func(chain_to_object(chain)),
        getattr(func, '__name__', 'object_predicate'),
    )
