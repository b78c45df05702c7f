"""
Workflow Module
Upload driver and command-line entry point.
"""

from .pipeline import build_remote_filename, process_upload

__all__ = ['build_remote_filename', 'process_upload']
