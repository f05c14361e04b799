"""User configuration model for ocenv."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ACTIVATION_KINDS = ("direct-export", "directory-hook")
DEFAULT_ACTIVATION = "direct-export"


class OcEnvConfig(BaseModel):
    """Settings read from ~/.ocenv.yaml."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    login_scripts: dict[str, str] = Field(default_factory=dict, alias="loginScripts")
    activation: Literal["direct-export", "directory-hook"] = DEFAULT_ACTIVATION
    shell: str | None = None
