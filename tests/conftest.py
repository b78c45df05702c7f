"""Shared fixtures and HTTP stubs for the test-suite."""

import json
import sys

import pytest
from loguru import logger

from ghupload.core.models import UploaderConfig


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR" + b"\x00" * 32


class FakeResponse:
	"""Minimal stand-in for :class:`requests.Response`."""

	def __init__(self, status_code=200, content=b"", payload=None):
		self.status_code = status_code
		if payload is not None:
			content = json.dumps(payload).encode("utf-8")
		self.content = content
		self.text = content.decode("utf-8", errors="replace")

	def json(self):
		return json.loads(self.text)

	def __enter__(self):
		return self

	def __exit__(self, *exc_info):
		return False


def created_response(download_url):
	return FakeResponse(status_code=201, payload={"content": {"download_url": download_url}})


@pytest.fixture(autouse=True)
def reset_logging():
	yield
	logger.remove()
	logger.add(sys.stderr)


@pytest.fixture
def config():
	return UploaderConfig(repo="owner/project", branch="main", token="secret", path="image/2023")


@pytest.fixture
def config_file(tmp_path):
	path = tmp_path / "config.json"
	path.write_text(json.dumps({
		"repo": "owner/project",
		"branch": "main",
		"token": "secret",
		"path": "image/2023",
	}), encoding="utf-8")
	return path
