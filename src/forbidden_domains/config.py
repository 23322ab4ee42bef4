from typing import Literal

from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "FORBIDDEN_DOMAINS_"}

    # Reject empty labels ("a..b", ".com", "com.") instead of keeping them
    strict_labels: bool = _defaults.get("strict_labels", True)

    # Output
    output_format: Literal["plain", "jsonl"] = _defaults.get("output_format", "plain")

    # Logging
    log_level: Literal["debug", "info", "warning", "error", "critical"] = _defaults.get(
        "log_level", "warning"
    )


settings = Settings()
