"""Contract tag record model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContractTag(BaseModel):
    """One public tag describing a contract address.

    Field aliases are the column names of the tag registry format, so
    ``to_dict()`` produces the exact record shape consumers expect.
    """

    contract_address: str = Field(..., alias="Contract Address")
    public_name_tag: str = Field(..., alias="Public Name Tag")
    project_name: str = Field(..., alias="Project Name")
    website_link: str = Field(..., alias="UI/Website Link")
    public_note: str = Field(..., alias="Public Note")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
