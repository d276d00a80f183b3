"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False


class StorageSettings(BaseModel):
    icons_dir: Path = Field(default=Path("public/icons"))


class UISettings(BaseModel):
    preview_size: int = Field(default=48, gt=0)
    copy_feedback_ms: int = Field(default=1500, ge=0)
    # How long GET / waits for a load before answering with the loading screen.
    initial_load_wait: float = Field(default=2.0, ge=0)


class SourceSettings(BaseModel):
    """Where the explorer reads icons from; the local icons directory unless remote_url is set."""

    remote_url: Optional[str] = None
    timeout: float = Field(default=10.0, gt=0)


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    project_name: str = "Icon Explorer"
    api_prefix: str = "/api"

    # The single environment knob the deployment relies on; overrides server.port.
    port_override: Optional[int] = Field(default=None, validation_alias="PORT")

    server: ServerSettings = ServerSettings()
    storage: StorageSettings = StorageSettings()
    ui: UISettings = UISettings()
    source: SourceSettings = SourceSettings()

    static_dir: Path = PACKAGE_DIR / "web" / "static"
    template_dir: Path = PACKAGE_DIR / "web" / "templates"

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        if self.port_override is not None:
            return self.port_override
        return self.server.port

    @property
    def icons_dir(self) -> Path:
        return _resolve_path(self.storage.icons_dir)

    @property
    def preview_size(self) -> int:
        return self.ui.preview_size

    @property
    def copy_feedback_ms(self) -> int:
        return self.ui.copy_feedback_ms

    @property
    def initial_load_wait(self) -> float:
        return self.ui.initial_load_wait

    @property
    def remote_url(self) -> Optional[str]:
        if not self.source.remote_url:
            return None
        return self.source.remote_url.rstrip("/")


def _resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (Path.cwd() / path).resolve()


@lru_cache()
def get_settings() -> Settings:
    return Settings()
