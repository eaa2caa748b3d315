from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class SecretsConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    repo_api_root: str | None = Field(default=None, alias="REPO_API_ROOT")
    repo_raw_root: str | None = Field(default=None, alias="REPO_RAW_ROOT")


class HTTPConfig(BaseModel):
    timeout: float = 30.0
    user_agent: str = "pagehooks"


class NavConfig(BaseModel):
    enabled: bool = True
    summary_path: str = "SUMMARY.md"


class PageHooksConfig(BaseModel):
    secrets: SecretsConfig = Field(default_factory=SecretsConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    nav: NavConfig = Field(default_factory=NavConfig)
    context_path: str = "/"
    last_modified_style: Literal["relative", "absolute"] = "relative"
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
