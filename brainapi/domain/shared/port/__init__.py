from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces implemented in the infrastructure layer."""
