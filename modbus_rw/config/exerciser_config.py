"""Exerciser configuration.

Settings for a transaction run: which registers to read and write, how
many exchanges to run and how to report values. Loaded from a mapping or a
YAML file and validated with a voluptuous schema.

Example YAML:

    unit_id: 1
    read_start: 0
    read_count: 4
    write_start: 2
    write_values: [99, 99]
    repeat: 5
    receive_timeout: 500
    signed: true
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import voluptuous as vol
import yaml

from ..const import (
    DEFAULT_RECEIVE_TIMEOUT,
    DEFAULT_REPEAT,
    DEFAULT_UNIT_ID,
    MAX_REGISTER,
    MAX_UNIT_ID,
    MAX_WORDS,
)
from ..domain.messages import ReadWriteMultipleRequest

_LOGGER = logging.getLogger(__name__)

_ADDRESS = vol.All(vol.Coerce(int), vol.Range(min=0, max=MAX_REGISTER))
_WORD_COUNT = vol.All(vol.Coerce(int), vol.Range(min=0, max=MAX_WORDS))
_REGISTER_VALUE = vol.All(vol.Coerce(int), vol.Range(min=-0x8000, max=0xFFFF))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("unit_id", default=DEFAULT_UNIT_ID): vol.All(
            vol.Coerce(int), vol.Range(min=0, max=MAX_UNIT_ID)
        ),
        vol.Optional("read_start", default=0): _ADDRESS,
        vol.Optional("read_count", default=0): _WORD_COUNT,
        vol.Optional("write_start", default=0): _ADDRESS,
        vol.Optional("write_values", default=list): vol.All(
            [_REGISTER_VALUE], vol.Length(max=MAX_WORDS)
        ),
        vol.Optional("repeat", default=DEFAULT_REPEAT): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
        vol.Optional("receive_timeout", default=DEFAULT_RECEIVE_TIMEOUT): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
        vol.Optional("signed", default=True): vol.Boolean(),
        vol.Optional("headless", default=False): vol.Boolean(),
    }
)


@dataclass(frozen=True)
class ExerciserConfig:
    """Validated settings for a transaction run.

    Attributes:
        unit_id: Slave unit identifier
        read_start: First register to read
        read_count: Number of registers to read
        write_start: First register to write
        write_values: Values to write each iteration
        repeat: Number of exchanges
        receive_timeout: Receive timeout in milliseconds
        signed: Report values as signed 16-bit
        headless: Build requests without transaction envelope
    """

    unit_id: int = DEFAULT_UNIT_ID
    read_start: int = 0
    read_count: int = 0
    write_start: int = 0
    write_values: Tuple[int, ...] = field(default_factory=tuple)
    repeat: int = DEFAULT_REPEAT
    receive_timeout: int = DEFAULT_RECEIVE_TIMEOUT
    signed: bool = True
    headless: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExerciserConfig":
        """Validate a configuration mapping.

        Args:
            data: Raw configuration values

        Returns:
            Validated configuration

        Raises:
            ValueError: If configuration is invalid
        """
        try:
            validated = CONFIG_SCHEMA(data)
        except vol.Invalid as err:
            raise ValueError(f"Invalid exerciser configuration: {err}") from err

        validated["write_values"] = tuple(validated["write_values"])
        return cls(**validated)

    def build_request(self, iteration: int = 0) -> ReadWriteMultipleRequest:
        """Build a fresh request for one iteration.

        Requests are never reused across attempts; every call allocates a
        new request and write payload.
        """
        return ReadWriteMultipleRequest(
            unit_id=self.unit_id,
            read_start=self.read_start,
            read_count=self.read_count,
            write_start=self.write_start,
            values=self.write_values,
            headless=self.headless,
        )


def load_exerciser_config(path: Union[str, Path]) -> ExerciserConfig:
    """Load and validate exerciser configuration from YAML.

    Args:
        path: YAML file path

    Returns:
        Validated configuration

    Raises:
        ValueError: If configuration is invalid or empty
        FileNotFoundError: If configuration file not found
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        data = yaml.safe_load(config_file.read_text())
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML: {err}") from err

    if not data:
        raise ValueError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping")

    config = ExerciserConfig.from_dict(data)

    _LOGGER.info(
        "Loaded exerciser configuration: unit=%d, read=0x%04X+%d, "
        "write=0x%04X+%d, repeat=%d",
        config.unit_id,
        config.read_start,
        config.read_count,
        config.write_start,
        len(config.write_values),
        config.repeat,
    )

    return config
