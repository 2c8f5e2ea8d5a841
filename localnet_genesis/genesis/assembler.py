"""Primary network genesis assembly."""

import logging
import time
from typing import List, Optional, Sequence

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from ..config import GenesisParams
from ..crypto import NodeKeys, derive_node_id, load_bls_secret_key, new_proof_of_possession
from ..errors import (
    BLSKeyError,
    GenesisInputError,
    NodeIDError,
    NodeKeyError,
    ProofOfPossessionError,
    SerializationError,
)
from ..models import Allocation, GenesisDocument, InitialStaker, Signer, UnlockTranche
from .cchain import build_embedded_genesis


logger = logging.getLogger(__name__)


def build_initial_staker(index: int, keys: NodeKeys, params: GenesisParams) -> InitialStaker:
    """
    Derive the genesis validator entry for one node.

    Args:
        index: Position of the node in the input list, used in errors
        keys: Node key material
        params: Genesis parameters

    Returns:
        InitialStaker

    Raises:
        NodeIDError, BLSKeyError, ProofOfPossessionError
    """
    try:
        node_id = derive_node_id(keys.staking_key, keys.staking_cert)
    except (ValueError, TypeError) as e:
        raise NodeIDError(index, str(e)) from e

    try:
        secret_key = load_bls_secret_key(keys.bls_key)
    except (ValueError, TypeError) as e:
        raise BLSKeyError(index, str(e), node_id=node_id) from e

    try:
        pop = new_proof_of_possession(secret_key)
    except (ValueError, TypeError, AssertionError) as e:
        raise ProofOfPossessionError(index, str(e), node_id=node_id) from e

    logger.debug(f"Node {index}: {node_id}")
    return InitialStaker(
        delegation_fee=params.delegation_fee,
        node_id=node_id,
        reward_address=params.reward_address,
        signer=Signer(
            proof_of_possession=pop.proof_of_possession_hex,
            public_key=pop.public_key_hex,
        ),
    )


def build_allocations(lock_time: int, params: GenesisParams) -> List[Allocation]:
    """
    Build the wallet and staking reserve allocations.

    Args:
        lock_time: Unlock time of every locked tranche
        params: Genesis parameters

    Returns:
        [wallet allocation, staking allocation]
    """
    wallet = Allocation(
        avax_addr=params.wallet_address,
        eth_addr=params.eth_address,
        initial_amount=params.wallet_initial_amount,
        unlock_schedule=[
            UnlockTranche(amount=params.wallet_unlocked_amount),
            UnlockTranche(amount=params.wallet_locked_amount, locktime=lock_time),
        ],
    )
    staking = Allocation(
        avax_addr=params.staking_address,
        eth_addr=params.eth_address,
        initial_amount=params.staking_initial_amount,
        unlock_schedule=[
            UnlockTranche(amount=params.staking_locked_amount, locktime=lock_time),
        ],
    )
    return [wallet, staking]


def build_genesis_document(
    network_id: int,
    node_keys: Sequence[NodeKeys],
    params: Optional[GenesisParams] = None,
    start_time: Optional[int] = None
) -> GenesisDocument:
    """
    Build the primary network genesis model.

    Args:
        network_id: Network identifier echoed into the genesis
        node_keys: Key material of the initial validators, in genesis order
        params: Genesis parameters (defaults reproduce the local network)
        start_time: Genesis Unix time; the wall clock is read once if None

    Returns:
        GenesisDocument

    Raises:
        GenesisError: On the first failing step; no partial document is returned
    """
    params = params or GenesisParams()

    c_chain_genesis = build_embedded_genesis(params.embedded_chain)

    if start_time is None:
        start_time = int(time.time())

    try:
        initial_stakers = [
            build_initial_staker(index, keys, params)
            for index, keys in enumerate(node_keys)
        ]
    except NodeKeyError as e:
        logger.error(f"Genesis assembly aborted: {e}")
        raise

    try:
        lock_time = start_time + params.locktime_delta
        return GenesisDocument(
            network_id=network_id,
            start_time=start_time,
            initial_stake_duration=params.initial_stake_duration,
            initial_stake_duration_offset=params.initial_stake_duration_offset,
            initial_stakers=initial_stakers,
            allocations=build_allocations(lock_time, params),
            initial_staked_funds=[params.staking_address],
            c_chain_genesis=c_chain_genesis.decode('utf-8'),
            message=params.message,
        )
    except (ValidationError, TypeError) as e:
        logger.error(f"Invalid genesis input: {e}")
        raise GenesisInputError(f"invalid genesis input: {e}") from e


def assemble_genesis(
    network_id: int,
    node_keys: Sequence[NodeKeys],
    params: Optional[GenesisParams] = None,
    start_time: Optional[int] = None
) -> bytes:
    """
    Assemble and serialize the primary network genesis.

    Args:
        network_id: Network identifier echoed into the genesis
        node_keys: Key material of the initial validators, in genesis order
        params: Genesis parameters (defaults reproduce the local network)
        start_time: Genesis Unix time; the wall clock is read once if None

    Returns:
        Indented JSON bytes

    Raises:
        GenesisError: On the first failing step
    """
    document = build_genesis_document(network_id, node_keys, params=params, start_time=start_time)

    try:
        data = document.to_json()
    except (PydanticSerializationError, TypeError, ValueError) as e:
        logger.error(f"Genesis serialization failed: {e}")
        raise SerializationError(f"couldn't serialize genesis: {e}") from e

    logger.info(
        f"Assembled genesis for network {network_id}: "
        f"{len(document.initial_stakers)} initial stakers, start time {document.start_time}"
    )
    return data
