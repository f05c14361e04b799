"""Subset of the OCM CLI configuration file used by ocenv."""

from pydantic import BaseModel, ConfigDict


class OcmConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None
