"""Genesis builders."""

from .cchain import build_embedded_chain, build_embedded_genesis
from .assembler import assemble_genesis, build_genesis_document

__all__ = [
    "build_embedded_chain",
    "build_embedded_genesis",
    "assemble_genesis",
    "build_genesis_document",
]
