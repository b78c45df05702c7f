"""Read upload sources from disk or download them over HTTP."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import unquote, urlparse

import requests
from loguru import logger

from ..core.exceptions import FetchError
from ..core.models import FetchedSource


_REMOTE_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_remote(source: str) -> bool:
	return bool(_REMOTE_PATTERN.match(source))


def derive_filename(source: str) -> str:
	"""Base name used for the uploaded file.

	For URLs the query string and fragment are dropped and the last path
	segment is used; a URL without a path falls back to its host.
	"""

	if is_remote(source):
		parsed = urlparse(source)
		name = PurePosixPath(unquote(parsed.path)).name
		return name or parsed.netloc
	return os.path.basename(os.path.normpath(source))


class SourceFetcher:
	"""Fetch the bytes behind a local path or an HTTP(S) URL.

	Remote downloads carry no timeout unless one is given.
	"""

	def __init__(self, download_timeout: Optional[float] = None):
		self.download_timeout = download_timeout

	def fetch(self, source: str) -> FetchedSource:
		"""
		Read a single source.

		Args:
			source: Local filesystem path or ``http(s)://`` URL

		Returns:
			FetchedSource holding the raw bytes

		Raises:
			FetchError: If the file cannot be read or the download fails
		"""
		if is_remote(source):
			data = self._download(source)
		else:
			data = self._read_local(source)
		logger.debug(f"Fetched {len(data)} bytes from {source}")
		return FetchedSource(source=source, name=derive_filename(source), data=data)

	def fetch_base64(self, source: str) -> str:
		return self.fetch(source).encoded

	# ------------------------------------------------------------------
	# Internal helpers
	# ------------------------------------------------------------------

	def _download(self, url: str) -> bytes:
		try:
			with requests.get(url, timeout=self.download_timeout) as response:
				if response.status_code != 200:
					raise FetchError(f"download failed: {url}")
				return response.content
		except requests.exceptions.RequestException as e:
			raise FetchError(f"download failed: {url}: {e}") from e

	def _read_local(self, path: str) -> bytes:
		try:
			with Path(path).open("rb") as handle:
				size = os.fstat(handle.fileno()).st_size
				data = handle.read(size) if size else handle.read()
		except OSError as e:
			raise FetchError(f"cannot read {path}: {e}") from e
		return data


def fetch_base64(source: str) -> str:
	"""Shortcut returning the base64 encoding of ``source``."""

	return SourceFetcher().fetch_base64(source)
