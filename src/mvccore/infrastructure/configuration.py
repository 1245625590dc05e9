"""
Configuration Management for mvccore

🔧 Unified Configuration:
A single validated configuration object drives every core: how many
released notifications to keep for reuse, whether one failing observer may
stop a broadcast, whether dispatch metrics are collected, and how the
library logs.
"""

import os
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class CoreConfig(BaseModel):
    """Complete configuration for a dispatch core"""
    environment: Environment = Environment.DEVELOPMENT

    # None keeps every released notification, 0 disables pooling
    notification_pool_size: Optional[int] = Field(default=256, ge=0)
    isolate_observer_errors: bool = False
    enable_metrics: bool = True

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> "CoreConfig":
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.isolate_observer_errors = True
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "CoreConfig":
        """Create configuration from dictionary"""
        return cls.model_validate(config_dict)

    @classmethod
    def from_environment(cls) -> "CoreConfig":
        """Create configuration from environment variables"""
        env_name = os.getenv("MVCCORE_ENV", "development")
        config = cls.for_environment(Environment(env_name))

        pool_size = os.getenv("MVCCORE_POOL_SIZE")
        if pool_size:
            config.notification_pool_size = None if pool_size.lower() == "unbounded" else int(pool_size)

        if os.getenv("MVCCORE_ISOLATE_ERRORS"):
            config.isolate_observer_errors = os.getenv("MVCCORE_ISOLATE_ERRORS").lower() == "true"

        if os.getenv("MVCCORE_LOG_LEVEL"):
            config.logging.level = os.getenv("MVCCORE_LOG_LEVEL").upper()

        # Attribute assignment bypasses validation, so re-validate once
        return cls.model_validate(config.model_dump())

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return self.model_dump(mode="json")


# Global configuration management
_current_config: Optional[CoreConfig] = None


def set_config(config: CoreConfig):
    """Set the global configuration"""
    global _current_config
    _current_config = config


def get_config() -> CoreConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        _current_config = CoreConfig.from_environment()

    return _current_config


def reset_config():
    """Forget the global configuration so it is rebuilt on next access"""
    global _current_config
    _current_config = None


def configure_from_dict(config_dict: Dict[str, Any]) -> CoreConfig:
    """Configure from dictionary"""
    config = CoreConfig.from_dict(config_dict)
    set_config(config)
    return config


__all__ = [
    "CoreConfig", "Environment", "LoggingConfig",
    "set_config", "get_config", "reset_config", "configure_from_dict"
]
