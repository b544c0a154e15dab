import json
from typing import Annotated, Any, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from artifactory_publish.resolver.params import split_patterns


class PluginSettings(BaseSettings):
    """Plugin settings loaded from Drone's PLUGIN_* environment variables.

    Drone exposes every `settings:` entry of a pipeline step as
    PLUGIN_<NAME>, and list values as a comma-separated string. The
    workspace root comes from DRONE_WORKSPACE.

    Values are kept raw here; validation and defaulting belong to
    resolve_params(), which receives to_config().
    """

    model_config = SettingsConfigDict(
        env_prefix="PLUGIN_",
        case_sensitive=False,
        extra="ignore",
    )

    # Repository
    url: Optional[str] = None
    repo_key: Optional[str] = None
    target_props: Optional[str] = None

    # Credentials. Access token, then username/password, then API key.
    username: Optional[str] = None
    password: Optional[str] = None
    access_token: Optional[str] = None
    api_key: Optional[str] = None

    # Coordinates, either explicit or read from a manifest.
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    pom: Optional[str] = None
    package: Optional[str] = None

    files: Annotated[list[str], NoDecode] = []
    force_upload: bool = False

    # TLS
    insecure: bool = False
    pem_file_path: Optional[str] = None
    pem_file_contents: Optional[str] = None

    # Logging
    log_level: str = "info"
    log_json: bool = False

    workspace: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DRONE_WORKSPACE", "PLUGIN_WORKSPACE"),
    )

    @field_validator("files", mode="before")
    @classmethod
    def split_files(cls, v: Any) -> list[str]:
        if isinstance(v, str) and v.strip().startswith("["):
            v = json.loads(v)
        return split_patterns(v)

    def to_config(self) -> dict[str, Any]:
        """Return the raw configuration map for resolve_params()."""
        return self.model_dump(
            exclude={"workspace", "log_level", "log_json"},
            exclude_none=True,
        )


def get_settings() -> PluginSettings:
    return PluginSettings()
