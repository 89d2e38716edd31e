"""Testing utilities for memexplorer consumers."""

from .fixtures import FixedSizeOracle, Node, RecordingVisitor, SlottedNode

__all__ = ['FixedSizeOracle', 'Node', 'RecordingVisitor', 'SlottedNode']
