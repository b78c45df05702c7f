"""Exception types raised by ghupload."""

from __future__ import annotations

from typing import Optional


class UploaderError(Exception):
	"""Base class for every error raised by this package."""


class ConfigError(UploaderError):
	"""The config file could not be opened, read or parsed."""


class NoInputError(UploaderError):
	"""No file or URL was given on the command line."""


class FetchError(UploaderError):
	"""A single input could not be read or downloaded."""


class UploadError(UploaderError):
	"""The Contents API did not accept a file."""

	def __init__(self, message: str, status_code: Optional[int] = None):
		super().__init__(message)
		self.status_code = status_code
