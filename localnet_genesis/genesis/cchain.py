"""Embedded execution chain genesis builder."""

import logging
from typing import Optional

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..config import EmbeddedChainParams
from ..errors import EmbeddedGenesisError
from ..models import ChainConfig, EmbeddedChainGenesis, GenesisAccount


logger = logging.getLogger(__name__)


def build_embedded_chain(params: Optional[EmbeddedChainParams] = None) -> EmbeddedChainGenesis:
    """
    Build the embedded chain genesis model.

    All legacy forks activate at block zero and the network upgrades at the
    instant they are active on local networks, so the chain has every
    feature from its first block.

    Args:
        params: Chain parameters (defaults reproduce the local network)

    Returns:
        EmbeddedChainGenesis with a single funded address
    """
    params = params or EmbeddedChainParams()

    config = ChainConfig(
        chain_id=params.chain_id,
        subnet_evm_timestamp=0,
        durango_timestamp=params.initially_active_time,
        etna_timestamp=params.initially_active_time,
        fortuna_timestamp=params.fortuna_timestamp,
        granite_timestamp=params.granite_timestamp,
    )
    return EmbeddedChainGenesis(
        config=config,
        timestamp=params.initially_active_time,
        gas_limit=params.gas_limit,
        alloc={params.funded_address: GenesisAccount(balance=params.funded_balance)},
    )


def build_embedded_genesis(params: Optional[EmbeddedChainParams] = None) -> bytes:
    """
    Build and serialize the embedded chain genesis.

    Returns:
        Compact JSON bytes

    Raises:
        EmbeddedGenesisError: If the genesis cannot be built or serialized
    """
    try:
        genesis = build_embedded_chain(params)
        data = genesis.to_json()
    except (ValidationError, PydanticSerializationError, TypeError, ValueError) as e:
        logger.error(f"Embedded chain genesis failed: {e}")
        raise EmbeddedGenesisError(f"couldn't build embedded chain genesis: {e}") from e

    logger.debug(f"Built embedded chain genesis for chain {genesis.config.chain_id} ({len(data)} bytes)")
    return data
