"""Server configuration."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables with QTS_ prefix.
    Example: QTS_DEFAULT_BACKEND=my_device QTS_LOG_LEVEL=DEBUG uv run qtranspile-server
    """

    model_config = SettingsConfigDict(env_prefix="QTS_")

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Device descriptions (*.json) loaded on top of the built-in presets
    backends_dir: Path = Path("builtin/backends")
    default_backend: str = "ibm_demo"

    transpiler_version: str = "0.1.0"
    log_level: str = "INFO"


settings = Settings()
