from pydantic import BaseModel, ConfigDict, Field


class UserPublic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    internal_id: int = Field(alias="internalId")
    id: str
    created_at: str = Field(alias="createdAt")

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)
