"""
Fetchers Module
Reads upload sources and sniffs their content type.
"""

from .content_sniffer import detect_content_type, guess_extension
from .source_fetcher import SourceFetcher, derive_filename, fetch_base64, is_remote

__all__ = ['SourceFetcher', 'derive_filename', 'detect_content_type', 'fetch_base64', 'guess_extension', 'is_remote']
