"""Embedded execution chain genesis models."""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..config import HEXA0, ZERO_ADDRESS, ZERO_HASH
from .encoding import dumps


class ChainConfig(BaseModel):
    """
    Execution chain parameters.

    Legacy Ethereum forks are activated at block zero, network upgrades
    by timestamp. Unset upgrades are omitted from the serialized form.
    Unknown keys are preserved when parsing.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    chain_id: int = Field(..., alias="chainId", description="EVM chain ID")
    homestead_block: int = Field(0, alias="homesteadBlock")
    dao_fork_block: int = Field(0, alias="daoForkBlock")
    dao_fork_support: bool = Field(True, alias="daoForkSupport")
    eip150_block: int = Field(0, alias="eip150Block")
    eip155_block: int = Field(0, alias="eip155Block")
    eip158_block: int = Field(0, alias="eip158Block")
    byzantium_block: int = Field(0, alias="byzantiumBlock")
    constantinople_block: int = Field(0, alias="constantinopleBlock")
    petersburg_block: int = Field(0, alias="petersburgBlock")
    istanbul_block: int = Field(0, alias="istanbulBlock")
    muir_glacier_block: int = Field(0, alias="muirGlacierBlock")
    subnet_evm_timestamp: Optional[int] = Field(0, alias="subnetEVMTimestamp")
    durango_timestamp: Optional[int] = Field(None, alias="durangoTimestamp")
    etna_timestamp: Optional[int] = Field(None, alias="etnaTimestamp")
    fortuna_timestamp: Optional[int] = Field(None, alias="fortunaTimestamp")
    granite_timestamp: Optional[int] = Field(None, alias="graniteTimestamp")


class GenesisAccount(BaseModel):
    """Pre-funded account."""
    balance: str = Field(..., description="Hex encoded balance in wei")


class EmbeddedChainGenesis(BaseModel):
    """Genesis of the execution chain, carried as a string in the primary genesis."""
    model_config = ConfigDict(populate_by_name=True)

    config: ChainConfig = Field(..., description="Chain parameters")
    timestamp: int = Field(..., description="Genesis block time")
    nonce: str = Field(HEXA0)
    extra_data: str = Field("0x00", alias="extraData")
    gas_limit: str = Field(..., alias="gasLimit", description="Hex encoded block gas limit")
    difficulty: str = Field(HEXA0, description="Always zero, proof of work is unused")
    mix_hash: str = Field(ZERO_HASH, alias="mixHash")
    coinbase: str = Field(ZERO_ADDRESS)
    alloc: Dict[str, GenesisAccount] = Field(default_factory=dict, description="Address to account")
    number: str = Field(HEXA0)
    gas_used: str = Field(HEXA0, alias="gasUsed")
    parent_hash: str = Field(ZERO_HASH, alias="parentHash")

    def to_json(self) -> bytes:
        """Serialize to compact JSON with sorted keys."""
        data = self.model_dump(mode='json', by_alias=True, exclude_none=True)
        return dumps(data)
