"""
GitHub client for creating files through the Contents API.
See https://docs.github.com/en/rest/repos/contents#create-or-update-file-contents
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from loguru import logger

from ..core.exceptions import UploadError
from ..core.models import UploaderConfig


class GitHubClient:
    """GitHub API client for file uploads."""

    def __init__(self, config: UploaderConfig):
        """
        Initialize GitHub client.

        Args:
            config: Target repository configuration
        """
        self.config = config
        self.repo = config.repo.strip('/')
        self.branch = config.branch
        self.target_dir = config.path.strip('/')
        self.timeout: Optional[float] = config.timeout or None

        self.api_base_url = config.api_base_url.rstrip('/')
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {config.token}",
            "Content-Type": "application/json"
        }

        logger.debug(f"GitHubClient initialized for {self.repo}@{self.branch}")

    def contents_url(self, filename: str) -> str:
        """API URL of ``filename`` inside the configured target directory."""
        repo_file_path = quote(filename, safe="")
        if self.target_dir:
            repo_file_path = f"{quote(self.target_dir, safe='/')}/{repo_file_path}"
        return f"{self.api_base_url}/repos/{self.repo}/contents/{repo_file_path}"

    def _put(self, url: str, data: Dict[str, Any]) -> requests.Response:
        try:
            return requests.put(url, headers=self.headers, json=data, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise UploadError(f"request to {url} failed: {e}") from e

    def upload(self, message: str, filename: str, content_base64: str) -> str:
        """
        Create a file in the repository.

        Args:
            message: Commit message
            filename: Name of the file inside the target directory
            content_base64: Base64 encoded file content

        Returns:
            The ``download_url`` GitHub reports for the new file

        Raises:
            UploadError: On transport errors, a status other than 201 Created,
                or a response without a download URL
        """
        url = self.contents_url(filename)
        data = {
            "message": message,
            "content": content_base64,
            "branch": self.branch
        }

        logger.info(f"Uploading {filename} to {self.repo}")
        response = self._put(url, data)

        if response.status_code != 201:
            logger.debug(f"GitHub answered {response.status_code}: {response.text[:200]}")
            raise UploadError(f"ret code error: {response.status_code}", status_code=response.status_code)

        try:
            result = response.json()
        except ValueError as e:
            raise UploadError(f"invalid JSON in response for {filename}: {e}", status_code=201) from e

        content = result.get('content') if isinstance(result, dict) else None
        download_url = content.get('download_url') if isinstance(content, dict) else None
        if not download_url:
            raise UploadError(f"no download_url in response for {filename}", status_code=201)

        logger.info(f"Successfully uploaded {filename}")
        return download_url
