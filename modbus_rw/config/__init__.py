"""Configuration for transaction runs."""

from .exerciser_config import CONFIG_SCHEMA, ExerciserConfig, load_exerciser_config

__all__ = [
    "CONFIG_SCHEMA",
    "ExerciserConfig",
    "load_exerciser_config",
]
