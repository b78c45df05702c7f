"""
GitHub Uploader Module
Provides functionality to upload files to GitHub repositories.
"""

from .github_client import GitHubClient

__all__ = ['GitHubClient']
