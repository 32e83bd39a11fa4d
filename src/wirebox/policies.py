from enum import Enum


class CycleDetection(str, Enum):
    """Policy for detecting dependency cycles when binding constructors."""

    GRAPH = "graph"
    """Walk the whole dependency map and reject any cycle the new binding would close."""

    IMMEDIATE = "immediate"
    """Reject only self-dependencies and two-node cycles with an existing binding."""
