# pagekit/core/static.py

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class StaticMount(BaseModel):
    """A directory served verbatim under a URL prefix (collect_static_mounts hook)."""
    model_config = ConfigDict(frozen=True)

    prefix: str
    directory: Path
    name: str

    @field_validator('prefix')
    @classmethod
    def check_prefix(cls, v: str) -> str:
        if not v.startswith("/") or v.endswith("/"):
            raise ValueError("A static prefix must start with '/' and must not end with '/'.")
        return v
