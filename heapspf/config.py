"""Configuration classes for heapspf components."""

from dataclasses import dataclass


@dataclass
class SpfConfig:
    """Runtime switches for shortest-path queries."""

    # Reject graphs with negative edge weights instead of returning
    # an undefined result
    validate_weights: bool = False

    # Verify heap order and index consistency after every pop (O(V^2) total)
    check_heap_invariants: bool = False


# Global configuration instance
SPF_CONFIG = SpfConfig()
