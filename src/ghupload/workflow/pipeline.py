"""Upload orchestration logic."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from loguru import logger

from ..core.exceptions import FetchError, NoInputError, UploadError
from ..core.models import UploaderConfig, UploadFailure, UploadReport
from ..fetchers.content_sniffer import guess_extension
from ..fetchers.source_fetcher import SourceFetcher
from ..github_uploader.github_client import GitHubClient


TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


def build_remote_filename(name: str, data: bytes, now: datetime) -> str:
	"""Timestamp-prefixed name, with a sniffed extension when ``name`` has none."""

	if "." not in name:
		name += guess_extension(data)
	return now.strftime(TIMESTAMP_FORMAT) + name


def process_upload(
	sources: Sequence[str],
	config: UploaderConfig,
	*,
	message: Optional[str] = None,
	fetcher: Optional[SourceFetcher] = None,
	client: Optional[GitHubClient] = None,
	now: Callable[[], datetime] = datetime.now,
) -> UploadReport:
	"""
	Fetch and upload every source in order, skipping the ones that fail.

	Raises:
		NoInputError: If ``sources`` is empty
	"""

	if not sources:
		raise NoInputError("no image url detected")

	fetcher = fetcher or SourceFetcher()
	client = client or GitHubClient(config)
	commit_message = message or config.message
	report = UploadReport()

	for index, source in enumerate(sources, start=1):
		logger.info(f"({index}/{len(sources)}) Processing {source}")
		try:
			fetched = fetcher.fetch(source)
		except FetchError as e:
			logger.error(f"Failed to get file: {e}")
			report.failures.append(UploadFailure(source=source, reason=str(e)))
			continue

		if fetched.is_empty:
			logger.error(f"Content empty: {source}")
			report.failures.append(UploadFailure(source=source, reason="empty content"))
			continue

		filename = build_remote_filename(fetched.name, fetched.data, now())
		try:
			download_url = client.upload(commit_message, filename, fetched.encoded)
		except UploadError as e:
			logger.error(f"Failed to upload {source}: {e}")
			report.failures.append(UploadFailure(source=source, reason=str(e)))
			continue

		report.download_urls.append(download_url)

	logger.info(f"Upload completed: {len(report.download_urls)}/{len(sources)} successful")
	return report
