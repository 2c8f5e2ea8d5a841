"""Primary network genesis document models."""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .cchain import EmbeddedChainGenesis
from .encoding import dumps


class Signer(BaseModel):
    """BLS signer registration of a validator."""
    model_config = ConfigDict(populate_by_name=True)

    proof_of_possession: str = Field(..., alias="proofOfPossession", description="0x-prefixed hex proof")
    public_key: str = Field(..., alias="publicKey", description="0x-prefixed hex compressed public key")


class InitialStaker(BaseModel):
    """Validator registered at genesis."""
    model_config = ConfigDict(populate_by_name=True)

    delegation_fee: int = Field(..., alias="delegationFee")
    node_id: str = Field(..., alias="nodeID", description="NodeID-... identity")
    reward_address: str = Field(..., alias="rewardAddress")
    signer: Signer


class UnlockTranche(BaseModel):
    """Portion of an allocation. Without locktime it is spendable at genesis."""
    amount: int
    locktime: Optional[int] = None


class Allocation(BaseModel):
    """Genesis token allocation with its unlock schedule."""
    model_config = ConfigDict(populate_by_name=True)

    avax_addr: str = Field(..., alias="avaxAddr")
    eth_addr: str = Field(..., alias="ethAddr")
    initial_amount: int = Field(..., alias="initialAmount", description="Unlocked at genesis")
    unlock_schedule: List[UnlockTranche] = Field(default_factory=list, alias="unlockSchedule")

    @property
    def total_amount(self) -> int:
        """Total genesis balance of the address."""
        return self.initial_amount + sum(t.amount for t in self.unlock_schedule)


class GenesisDocument(BaseModel):
    """
    Primary network genesis.

    Every node of the network loads the exact same bytes; the embedded
    chain genesis is stored as a JSON string inside this document.
    """
    model_config = ConfigDict(populate_by_name=True)

    network_id: int = Field(..., alias="networkID", ge=0, le=2**32 - 1, strict=True)
    start_time: int = Field(..., alias="startTime", ge=0, strict=True, description="Unix time of genesis")
    initial_stake_duration: int = Field(..., alias="initialStakeDuration")
    initial_stake_duration_offset: int = Field(..., alias="initialStakeDurationOffset")
    initial_stakers: List[InitialStaker] = Field(default_factory=list, alias="initialStakers")
    allocations: List[Allocation] = Field(default_factory=list)
    initial_staked_funds: List[str] = Field(default_factory=list, alias="initialStakedFunds")
    c_chain_genesis: str = Field(..., alias="cChainGenesis", description="Serialized embedded chain genesis")
    message: str = Field("")

    def to_json(self) -> bytes:
        """Serialize with sorted keys and single-space indentation."""
        data = self.model_dump(mode='json', by_alias=True, exclude_none=True)
        return dumps(data, indent=1)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "GenesisDocument":
        """Parse a serialized genesis document."""
        return cls.model_validate_json(data)

    def embedded_chain(self) -> EmbeddedChainGenesis:
        """Parse the embedded chain genesis string."""
        return EmbeddedChainGenesis.model_validate_json(self.c_chain_genesis)
