"""
Core Module
Configuration loading, datamodels and exceptions shared by the pipeline.
"""

from .config_loader import default_config_path, load_uploader_config
from .exceptions import ConfigError, FetchError, NoInputError, UploadError, UploaderError
from .models import FetchedSource, UploaderConfig, UploadFailure, UploadReport

__all__ = [
	'ConfigError',
	'FetchError',
	'FetchedSource',
	'NoInputError',
	'UploadError',
	'UploadFailure',
	'UploadReport',
	'UploaderConfig',
	'UploaderError',
	'default_config_path',
	'load_uploader_config',
]
