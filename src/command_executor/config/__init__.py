"""Configuration for the command executor."""

from .executor_config import (
    ACTIONS,
    ENV_EXECUTOR,
    ENV_LOG_LEVEL,
    ENV_SHELL,
    ExecutorConfig,
    load_config,
)

__all__ = [
    "ACTIONS",
    "ENV_EXECUTOR",
    "ENV_LOG_LEVEL",
    "ENV_SHELL",
    "ExecutorConfig",
    "load_config",
]
