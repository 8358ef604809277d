"""Record of the last successful install."""

from pydantic import BaseModel, ConfigDict, Field


class InstallState(BaseModel):
    """Contents of state.json; a cache, not authoritative."""

    model_config = ConfigDict(populate_by_name=True)

    version: str
    installed_at: str = Field(..., alias="installedAt", description="ISO-8601 timestamp")

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
