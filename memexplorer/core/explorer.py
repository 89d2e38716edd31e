"""Object graph exploration strategies for memexplorer.

Explorers walk the objects reachable from a root, asking a ReferenceAdapter
for each object's referents, consulting a composed filter to decide which
objects are accepted, and handing every accepted object to a visitor once.
They work with any adapter and any visitor.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, List, Optional, TypeVar

from ..config import ExplorationStrategy, ExplorerConfig, parse_strategy
from ..errors import ConfigurationError, IntrospectionError, NullRootError
from .adapter import PythonObjectAdapter, ReferenceAdapter
from .chain import Chain
from .predicates import AtMostOncePredicate, ChainPredicate, and_, not_shared_state
from .visitor import ObjectVisitor, Traversal


logger = logging.getLogger(__name__)

T = TypeVar('T')


class ObjectExplorer(ABC):
    """Abstract base class for object graph exploration strategies.

    An explorer owns no per-walk state between calls: every explore() builds
    its own at-most-once filter and frontier, so one explorer may be reused
    for any number of sequential walks. Visitors are single use.
    """

    def __init__(self,
                 adapter: Optional[ReferenceAdapter] = None,
                 config: Optional[ExplorerConfig] = None):
        """Initialize explorer with an adapter and configuration.

        Args:
            adapter: ReferenceAdapter for enumerating referents
                (default: PythonObjectAdapter)
            config: Exploration options (default: ExplorerConfig())

        Raises:
            ConfigurationError: If config fails validation
        """
        self.adapter = adapter if adapter is not None else PythonObjectAdapter()
        self.config = config if config is not None else ExplorerConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    def build_filter(self, additional_filter: Optional[Callable[[Chain], bool]] = None) -> ChainPredicate:
        """Compose the filter for a single walk.

        The at-most-once term always comes first so that later terms and the
        visitor never see an object twice.
        """
        terms: List[Callable[[Chain], bool]] = [AtMostOncePredicate()]
        if self.config.exclude_shared_state:
            terms.append(not_shared_state)
        if additional_filter is not None:
            terms.append(additional_filter)
        return and_(*terms)

    def explore(self,
                root: Any,
                visitor: ObjectVisitor[T],
                additional_filter: Optional[Callable[[Chain], bool]] = None) -> T:
        """Walk the graph reachable from root and return the visitor's result.

        Args:
            root: Object the walk starts from
            visitor: Fold receiving each accepted object once
            additional_filter: Extra Chain predicate ANDed after the standard
                at-most-once and shared-state terms

        Returns:
            visitor.result()

        Raises:
            NullRootError: If root is None
            IntrospectionError: If the adapter fails on an accepted object
        """
        if root is None:
            raise NullRootError()

        accept = self.build_filter(additional_filter)
        frontier = self._new_frontier()
        self._push(frontier, [Chain.root(root)])

        accepted = rejected = expanded = 0
        logger.debug("Exploring %s from %s root", self.__class__.__name__, type(root).__name__)

        while frontier:
            chain = self._pop(frontier)
            if not accept(chain):
                rejected += 1
                continue
            accepted += 1

            if visitor.visit(chain) is not Traversal.EXPLORE:
                continue
            if not self.config.should_expand(chain.depth):
                continue

            children = self._children(chain)
            if children:
                expanded += 1
                self._push(frontier, children)

        logger.debug(
            "Exploration finished: %d accepted, %d rejected, %d expanded",
            accepted, rejected, expanded,
        )
        return visitor.result()

    def _children(self, chain: Chain) -> List[Chain]:
        value = chain.value
        try:
            if self.adapter.is_terminal(value):
                return []
            refs = list(self.adapter.get_children(value))
        except Exception as e:
            logger.debug("Introspection failed at %s: %r", chain.path_string(), e)
            raise IntrospectionError(chain, e) from e
        return [chain.extend(hop, child) for hop, child in refs]

    @abstractmethod
    def _new_frontier(self) -> Any:
        pass

    @abstractmethod
    def _push(self, frontier: Any, chains: List[Chain]) -> None:
        """Add sibling chains to the frontier, keeping adapter order."""
        pass

    @abstractmethod
    def _pop(self, frontier: Any) -> Chain:
        pass


class DepthFirstExplorer(ObjectExplorer):
    """Depth-first pre-order exploration.

    An object is visited before its referents, and referents are visited in
    adapter order, each subtree completing before the next sibling starts.
    Uses an explicit stack, so graph depth is not limited by the recursion
    limit.
    """

    def _new_frontier(self) -> List[Chain]:
        return []

    def _push(self, frontier: List[Chain], chains: List[Chain]) -> None:
        # Reversed so the first referent is popped first
        frontier.extend(reversed(chains))

    def _pop(self, frontier: List[Chain]) -> Chain:
        return frontier.pop()


class BreadthFirstExplorer(ObjectExplorer):
    """Breadth-first exploration.

    Visits every object at hop distance N before any object at N+1. When an
    object is reachable along several paths it is visited through the
    shortest one.
    """

    def _new_frontier(self) -> Deque[Chain]:
        return deque()

    def _push(self, frontier: Deque[Chain], chains: List[Chain]) -> None:
        frontier.extend(chains)

    def _pop(self, frontier: Deque[Chain]) -> Chain:
        return frontier.popleft()


def create_explorer(adapter: Optional[ReferenceAdapter] = None,
                    config: Optional[ExplorerConfig] = None) -> ObjectExplorer:
    """Create an explorer instance for config.strategy.

    Args:
        adapter: ReferenceAdapter (default: PythonObjectAdapter)
        config: Exploration options (default: depth-first)

    Returns:
        ObjectExplorer instance
    """
    config = config if config is not None else ExplorerConfig()
    explorers = {
        ExplorationStrategy.DEPTH_FIRST: DepthFirstExplorer,
        ExplorationStrategy.BREADTH_FIRST: BreadthFirstExplorer,
    }
    return explorers[parse_strategy(config.strategy)](adapter, config)
