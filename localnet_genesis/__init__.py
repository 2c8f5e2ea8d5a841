"""Genesis generation for single-operator local test networks."""

from .genesis import assemble_genesis, build_embedded_genesis
from .crypto import NodeKeys

__version__ = "0.1.0"

__all__ = [
    "assemble_genesis",
    "build_embedded_genesis",
    "NodeKeys",
]
