"""Genesis document models."""

from .genesis import GenesisDocument, InitialStaker, Signer, Allocation, UnlockTranche
from .cchain import EmbeddedChainGenesis, ChainConfig, GenesisAccount

__all__ = [
    "GenesisDocument",
    "InitialStaker",
    "Signer",
    "Allocation",
    "UnlockTranche",
    "EmbeddedChainGenesis",
    "ChainConfig",
    "GenesisAccount",
]
