"""Fixed parameters of a local test network genesis."""

from typing import Optional
from pydantic import BaseModel, Field


# difference between unlock schedule locktime and starttime in the reference genesis
GENESIS_LOCKTIME_STARTTIME_DELTA = 2836800

# 2020-12-05T05:00:00Z, the instant every network upgrade is active on local networks
INITIALLY_ACTIVE_TIME = 1607144400

HEXA0 = "0x0"
ZERO_HASH = "0x" + "00" * 32
ZERO_ADDRESS = "0x" + "00" * 20

CCHAIN_ID = 43112
CCHAIN_GAS_LIMIT = "0x5f5e100"
CCHAIN_FUNDED_ADDRESS = "8db97C7cEcE249c2b98bDC0226Cc4C2A57BF52FC"
CCHAIN_FUNDED_BALANCE = "0x295BE96E64066972000000"

ALLOCATION_COMMON_ETH_ADDRESS = "0xb3d82b1367d362de99ab59a658165aff520cbd4d"
STAKING_ADDRESS = "X-custom1g65uqn6t77p656w64023nh8nd9updzmxwd59gh"
WALLET_ADDRESS = "X-custom18jma8ppw3nhx5r4ap8clazz0dps7rv5u9xde7p"

DELEGATION_FEE = 1000000
INITIAL_STAKE_DURATION = 31536000
INITIAL_STAKE_DURATION_OFFSET = 5400
GENESIS_MESSAGE = "{{ fun_quote }}"


class EmbeddedChainParams(BaseModel):
    """Parameters of the embedded execution chain genesis."""
    chain_id: int = Field(default=CCHAIN_ID, description="EVM chain ID")
    gas_limit: str = Field(default=CCHAIN_GAS_LIMIT, description="Block gas limit (hex)")
    funded_address: str = Field(
        default=CCHAIN_FUNDED_ADDRESS,
        description="Single pre-funded address (hex, no 0x prefix)"
    )
    funded_balance: str = Field(default=CCHAIN_FUNDED_BALANCE, description="Balance of the funded address (hex)")
    initially_active_time: int = Field(
        default=INITIALLY_ACTIVE_TIME,
        description="Unix time at which all upgrades are active"
    )
    fortuna_timestamp: Optional[int] = Field(None, description="Fortuna activation, unset by default")
    granite_timestamp: Optional[int] = Field(None, description="Granite activation, unset by default")


class GenesisParams(BaseModel):
    """
    Constants that shape the primary network genesis.

    The defaults reproduce the reference local network; callers normally
    never override them.
    """
    delegation_fee: int = Field(default=DELEGATION_FEE, description="Delegation fee of initial stakers")
    reward_address: str = Field(default=WALLET_ADDRESS, description="Reward address of initial stakers")
    wallet_address: str = Field(default=WALLET_ADDRESS, description="Wallet allocation address")
    staking_address: str = Field(default=STAKING_ADDRESS, description="Staking reserve address")
    eth_address: str = Field(default=ALLOCATION_COMMON_ETH_ADDRESS, description="Eth address of both allocations")
    wallet_initial_amount: int = Field(default=300000000000000000)
    wallet_unlocked_amount: int = Field(default=20000000000000000)
    wallet_locked_amount: int = Field(default=10000000000000000)
    staking_initial_amount: int = Field(default=0)
    staking_locked_amount: int = Field(default=10000000000000000)
    locktime_delta: int = Field(
        default=GENESIS_LOCKTIME_STARTTIME_DELTA,
        description="Offset of locked tranches from the start time"
    )
    initial_stake_duration: int = Field(default=INITIAL_STAKE_DURATION)
    initial_stake_duration_offset: int = Field(default=INITIAL_STAKE_DURATION_OFFSET)
    # Emitted as UTF-8 with <, > and & escaped as \u003c, \u003e, \u0026
    message: str = Field(default=GENESIS_MESSAGE, description="Free text message template")
    embedded_chain: EmbeddedChainParams = Field(
        default_factory=EmbeddedChainParams,
        description="Embedded execution chain parameters"
    )
