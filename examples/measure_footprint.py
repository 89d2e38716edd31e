#!/usr/bin/env python3
"""
Measuring object graph footprints with memexplorer.

This example demonstrates:
- Footprint of a plain object graph, with shared objects counted once
- Excluding part of the graph with an object predicate
- Running other folds (count, spanning graph) over the same kind of walk
"""

import enum
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from memexplorer import (
    count_reachable,
    measure_footprint_bytes,
    reachable_graph,
)


class Status(enum.Enum):
    ACTIVE = "active"
    RETIRED = "retired"


class Employee:
    def __init__(self, name, status, manager=None):
        self.name = name
        self.status = status
        self.manager = manager
        self.reports = []


def build_org():
    ceo = Employee("Ada", Status.ACTIVE)
    cto = Employee("Grace", Status.ACTIVE, manager=ceo)
    ceo.reports.append(cto)
    for i in range(5):
        engineer = Employee(f"engineer-{i}", Status.ACTIVE, manager=cto)
        cto.reports.append(engineer)
    return ceo


def main():
    org = build_org()

    # Cycles (manager <-> reports) are walked once; Status members are shared
    print(f"Whole org:          {measure_footprint_bytes(org):>6} bytes")

    # Leave out everyone under the CTO
    cto = org.reports[0]
    without_reports = measure_footprint_bytes(org, lambda obj: obj is not cto.reports)
    print(f"Without CTO reports: {without_reports:>6} bytes")

    print(f"Reachable objects:   {count_reachable(org):>6}")

    graph = reachable_graph(org)
    employees = [obj for obj in graph.nodes.values() if isinstance(obj, Employee)]
    print(f"Employees reached:   {len(employees):>6}")


if __name__ == "__main__":
    main()
