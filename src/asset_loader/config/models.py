from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

AssetKind = Literal["css", "html"]


class AssetSourceSet(BaseModel):
    """
    Named source URLs for one asset, e.g. ``github_raw`` and ``github_pages``.

    Source keys are free-form, so they are carried as extra fields. ``fallback`` is the
    only reserved key; ``"inline"`` means no remote fallback exists for the asset.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    fallback: Optional[str] = None

    @model_validator(mode="after")
    def check_sources(self) -> AssetSourceSet:
        extra = self.__pydantic_extra__ or {}
        for key, value in extra.items():
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Source '{key}' must be a non-empty URL string")
        if not extra:
            raise ValueError("Asset must define at least one source URL")
        return self

    @property
    def sources(self) -> Dict[str, str]:
        return dict(self.__pydantic_extra__ or {})

    def candidate_urls(self, primary_host: str) -> List[str]:
        """Distinct source URLs, the ``primary_host`` source first, the rest in declaration order."""
        sources = self.sources
        ordered: List[str] = []
        if primary_host in sources:
            ordered.append(sources[primary_host])
        for url in sources.values():
            if url not in ordered:
                ordered.append(url)
        return ordered


class CdnPolicy(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    primary_host: str
    cache_duration_ms: int = Field(alias="cache_duration", ge=0)
    retry_attempts: int = Field(ge=1)
    retry_delay_ms: int = Field(alias="retry_delay", ge=0)


class AssetConfiguration(BaseModel):
    """Remote asset configuration, decoded once and never mutated."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    version: str
    assets: Dict[str, Dict[str, AssetSourceSet]]
    cdn_policy: CdnPolicy = Field(alias="cdn_config")
    update_check_url: Optional[str] = None

    def find_asset(self, kind: str, asset_name: str) -> Optional[AssetSourceSet]:
        return self.assets.get(kind, {}).get(asset_name)


class RemoteVersion(BaseModel):
    """
    The part of a remote configuration the update check needs.

    ``version`` is kept as sent; a non-string value never equals the active version.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: Any


class HttpSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    request_timeout_seconds: float = Field(default=30.0, gt=0)


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 7


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = ""
    rotation: FileRotationSettings = FileRotationSettings()


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: FileLoggingSettings = FileLoggingSettings()


class LoaderSettings(BaseModel):
    """
    Local runtime settings for the asset loader.

    The remote asset configuration is fetched from ``config_url``; everything else here
    governs how this process talks to the network and where it logs.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    config_url: Optional[str] = None
    http: HttpSettings = HttpSettings()
    logging: LoggingSettings = LoggingSettings()


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Optional inputs for a settings loader.

    Implementations may use these to control where settings are read from.
    """

    yaml_path: str = "data/config/config.yaml"
    env_prefix: str = "ASSETS__"
    dotenv_path: Optional[str] = "data/.env"
