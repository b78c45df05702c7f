"""Helpers for loading uploader configuration."""

from __future__ import annotations

import json
import os
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from loguru import logger

from .exceptions import ConfigError
from .models import UploaderConfig


DEFAULT_CONFIG_NAME = "config.json"
TOKEN_ENV_VAR = "GH_TOKEN"

_UNRESOLVED_REFERENCE = re.compile(r"^\$(\w+|\{\w+\})$")


def _expand_env(value: Any) -> Any:
	"""Recursively expand environment variables in strings."""

	if isinstance(value, str):
		return os.path.expandvars(value)
	if isinstance(value, list):
		return [_expand_env(item) for item in value]
	if isinstance(value, dict):
		return {key: _expand_env(val) for key, val in value.items()}
	return value


def default_config_path() -> Path:
	"""``config.json`` in the directory holding the running executable."""

	return Path(sys.argv[0]).resolve().parent / DEFAULT_CONFIG_NAME


def _parse(config_path: Path, raw: str) -> Any:
	if config_path.suffix.lower() in (".yaml", ".yml"):
		return yaml.safe_load(raw)
	return json.loads(raw)


def load_uploader_config(path: Optional[Union[str, Path]] = None) -> UploaderConfig:
	"""
	Load the config file and return an :class:`UploaderConfig` instance.

	Args:
		path: Path to the config file, ``config.json`` beside the executable if omitted

	Returns:
		UploaderConfig instance

	Raises:
		ConfigError: If the file cannot be opened, read or parsed
	"""

	config_path = Path(path) if path else default_config_path()
	logger.debug(f"Loading config from {config_path}")

	try:
		with config_path.open("r", encoding="utf-8") as handle:
			raw = handle.read()
	except (OSError, UnicodeDecodeError) as e:
		raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

	try:
		data = _parse(config_path, raw)
	except (ValueError, yaml.YAMLError) as e:
		raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e

	if data is None:
		data = {}
	if not isinstance(data, dict):
		raise ConfigError(f"Config file {config_path} must contain an object, got {type(data).__name__}")

	expanded: Dict[str, Any] = _expand_env(data)
	token = expanded.get("token")
	if isinstance(token, str) and _UNRESOLVED_REFERENCE.match(token):
		logger.warning(f"Token references an unset variable: {token}")
		expanded["token"] = ""
	if not expanded.get("token"):
		env_token = os.getenv(TOKEN_ENV_VAR)
		if env_token:
			logger.debug(f"Using token from {TOKEN_ENV_VAR}")
			expanded["token"] = env_token

	try:
		return UploaderConfig.from_dict(expanded)
	except (TypeError, ValueError) as e:
		raise ConfigError(f"Invalid value in config file {config_path}: {e}") from e
