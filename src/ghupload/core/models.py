"""Core datamodels used across the ghupload pipeline."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List


DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_COMMIT_MESSAGE = "upload file"
DEFAULT_UPLOAD_TIMEOUT = 10.0


# ---------------------------------------------------------------------------
# Configuration dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UploaderConfig:
	"""Target repository settings, loaded once per process."""

	repo: str
	branch: str
	token: str
	path: str
	message: str = DEFAULT_COMMIT_MESSAGE
	api_base_url: str = DEFAULT_API_BASE_URL
	# 0 disables the upload timeout
	timeout: float = DEFAULT_UPLOAD_TIMEOUT

	@staticmethod
	def from_dict(payload: Dict[str, Any]) -> "UploaderConfig":
		return UploaderConfig(
			repo=str(payload.get("repo") or ""),
			branch=str(payload.get("branch") or ""),
			token=str(payload.get("token") or ""),
			path=str(payload.get("path") or ""),
			message=str(payload.get("message") or DEFAULT_COMMIT_MESSAGE),
			api_base_url=str(payload.get("api_base_url") or DEFAULT_API_BASE_URL),
			timeout=DEFAULT_UPLOAD_TIMEOUT if payload.get("timeout") is None else float(payload["timeout"]),
		)


# ---------------------------------------------------------------------------
# Runtime data models
# ---------------------------------------------------------------------------


@dataclass
class FetchedSource:
	"""Raw bytes read from a local path or downloaded from a URL."""

	source: str
	name: str
	data: bytes

	@property
	def encoded(self) -> str:
		return base64.b64encode(self.data).decode("ascii")

	@property
	def is_empty(self) -> bool:
		return not self.data


@dataclass
class UploadFailure:
	source: str
	reason: str


@dataclass
class UploadReport:
	download_urls: List[str] = field(default_factory=list)
	failures: List[UploadFailure] = field(default_factory=list)

	@property
	def succeeded(self) -> bool:
		return len(self.download_urls) > 0

	def summary(self) -> str:
		if self.succeeded:
			return "Upload Success:\n" + "\n".join(self.download_urls)
		return "none upload success"
