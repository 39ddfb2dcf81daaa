"""Home directory models for prefix resolution."""

from pydantic import BaseModel, ConfigDict, Field


class HomeRecord(BaseModel):
    """An account from the system user database."""

    model_config = ConfigDict(frozen=True)

    username: str
    uid: int = Field(..., ge=0)
    home_dir: str = Field(..., description="Home directory as recorded, not canonicalized")


class HomePrefix(BaseModel):
    """Result of stripping a home directory (or the root) from a path."""

    model_config = ConfigDict(frozen=True)

    remaining: tuple[str, ...] = Field(..., description="Components left after the prefix")
    consumed: str = Field(..., description="Real filesystem path that was stripped")
    display: str = Field("", description="Display form: '~', '~username' or empty")
