import logging

from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import Optional

class Settings(BaseSettings):
    # Environment
    ENV: str = "development"
    CONFIG_STRICT: bool = False
    LOG_LEVEL: str = "INFO"

    # Rationale word ceiling handed to the pipeline by the API/CLI layers
    RATIONALE_MAX_WORDS: int = 50

    # Decorative share text attached outside the core pipeline
    SHARE_MESSAGE_MAX_CHARS: int = 200

    # Server (matchmaker.serve)
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # CORS (comma-separated)
    ALLOWED_ORIGINS: str = "*"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings()


def validate_config(strict: Optional[bool] = None, settings_obj: Optional[Settings] = None, logger: Optional[logging.Logger] = None) -> bool:
    """Validate numeric limits.

    In strict mode raise RuntimeError; otherwise emit warnings only.
    Returns False when a problem was found and only warned about.
    """
    cfg = settings_obj or settings
    log = logger or logging.getLogger("matchmaker")
    strict_mode = strict if strict is not None else getattr(cfg, "CONFIG_STRICT", False)

    problems = []
    if cfg.RATIONALE_MAX_WORDS < 1:
        problems.append(f"RATIONALE_MAX_WORDS must be >= 1 (got {cfg.RATIONALE_MAX_WORDS})")
    if cfg.SHARE_MESSAGE_MAX_CHARS < 1:
        problems.append(f"SHARE_MESSAGE_MAX_CHARS must be >= 1 (got {cfg.SHARE_MESSAGE_MAX_CHARS})")

    if problems:
        message = f"Invalid configuration: {'; '.join(problems)}"
        if strict_mode:
            raise RuntimeError(message)
        log.warning(message)
        return False

    return True
