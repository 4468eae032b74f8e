"""Subgraph liquidity pool data model."""

from pydantic import BaseModel, ConfigDict, Field


class OutputToken(BaseModel):
    """LP token minted by a pool."""

    id: str
    name: str
    symbol: str

    model_config = ConfigDict(frozen=True)


class PoolRecord(BaseModel):
    """Liquidity pool as returned by the subgraph ``pools`` query."""

    output_token: OutputToken = Field(..., alias="outputToken")
    # Subgraph BigInt fields arrive as strings; pydantic coerces them.
    created_timestamp: int = Field(..., alias="createdTimestamp", ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
