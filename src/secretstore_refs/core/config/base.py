"""Base types and enums for configuration models."""

from enum import Enum


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class BehaviourParameter(str, Enum):
    """Parameters that control where resolved values are exposed."""

    EXPOSE_ENV = "secretstore.behaviour.expose.env"
    EXPOSE_CONFIG = "secretstore.behaviour.expose.config"
