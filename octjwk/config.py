"""
Configuration management for octjwk
Kid generation, key generation and logging settings
"""

import logging
from enum import Enum
from typing import Optional

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings

from .constants import KeyGenerationDefaults


class KidGenerator(str, Enum):
    """Strategies for filling in a missing 'kid'"""
    NONE = "none"               # Leave 'kid' unset
    KEY_DIGEST = "key_digest"   # DER/SHA fingerprint of the key
    THUMBPRINT = "thumbprint"   # RFC 7638 thumbprint


class JWKSettings(BaseSettings):
    """Key handling configuration settings"""

    kid_generator: KidGenerator = Field(
        default=KidGenerator.NONE,
        description="Default kid generator for keys constructed without a kid"
    )
    generated_key_size: int = Field(
        default=KeyGenerationDefaults.KEY_SIZE_BITS,
        description="Secret size in bits for SymmetricJWK.generate()"
    )

    log_level: str = Field(default="INFO")

    model_config = {"env_prefix": "OCTJWK_", "case_sensitive": False, "validate_assignment": True}


# Global configuration instance
settings = JWKSettings()


def get_settings() -> JWKSettings:
    """Get the global settings instance"""
    return settings


def update_settings(**kwargs) -> JWKSettings:
    """Update settings with new values"""
    global settings
    for key, value in kwargs.items():
        if hasattr(settings, key):
            setattr(settings, key, value)
    return settings


def reset_settings() -> JWKSettings:
    """Reload settings from the environment"""
    global settings
    settings = JWKSettings()
    return settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured JSON logging at the given (or configured) level"""
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(format="%(message)s", level=log_level)
    logging.getLogger().setLevel(log_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
