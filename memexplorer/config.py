"""Configuration system for memexplorer.

This module defines how callers tune an exploration: the order in which the
object graph is walked, whether shared process-wide state is filtered out,
and how deep the walk may go.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .errors import ConfigurationError


class ExplorationStrategy(Enum):
    """Order in which accepted objects are handed to the visitor.

    Depth-first keeps the pending frontier proportional to graph depth for
    the common shapes and is the default.
    """
    DEPTH_FIRST = "dfs"      # Pre-order: object before its referents
    BREADTH_FIRST = "bfs"    # All objects at hop distance N before N+1


def parse_strategy(strategy: Union[ExplorationStrategy, str]) -> ExplorationStrategy:
    """Parse a strategy given as an enum member or its name/value.

    Args:
        strategy: ExplorationStrategy or string such as 'dfs', 'bfs',
            'depth_first', 'breadth_first'

    Returns:
        ExplorationStrategy member

    Raises:
        ConfigurationError: If the string names no known strategy
    """
    if isinstance(strategy, ExplorationStrategy):
        return strategy

    aliases = {
        'dfs': ExplorationStrategy.DEPTH_FIRST,
        'depth_first': ExplorationStrategy.DEPTH_FIRST,
        'bfs': ExplorationStrategy.BREADTH_FIRST,
        'breadth_first': ExplorationStrategy.BREADTH_FIRST,
    }
    strategy_lower = str(strategy).lower()
    if strategy_lower not in aliases:
        raise ConfigurationError(
            f"Unknown exploration strategy: {strategy}. "
            f"Choose from: {', '.join(aliases.keys())}"
        )
    return aliases[strategy_lower]


@dataclass
class ExplorerConfig:
    """Complete configuration for an object graph exploration.

    Explorers call validate() on construction and refuse configurations that
    report problems.
    """

    strategy: ExplorationStrategy = ExplorationStrategy.DEPTH_FIRST

    # Drop classes, modules, builtin singletons and enum internals
    exclude_shared_state: bool = True

    # Objects at this hop distance from the root are visited but not expanded
    max_depth: Optional[int] = None

    def __post_init__(self):
        self.strategy = parse_strategy(self.strategy)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'ExplorerConfig':
        """Create config that only follows references a few hops deep.

        Args:
            max_depth: How deep to explore (default 1 = direct referents only)

        Returns:
            ExplorerConfig limited to max_depth
        """
        return cls(max_depth=max_depth)

    def should_expand(self, depth: int) -> bool:
        """Check if referents of an object at this depth should be explored."""
        if self.max_depth is None:
            return True
        return depth < self.max_depth

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer or None")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if not isinstance(self.exclude_shared_state, bool):
            errors.append("exclude_shared_state must be a boolean")

        return errors
