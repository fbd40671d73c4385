"""Utility modules for rpmsnap."""

from .logging import setup_logging
from .export import export_to_json
from .paths import get_install_root
from .prelink import extract_prelink_paths, prelink_candidates

__all__ = [
    "setup_logging",
    "export_to_json",
    "get_install_root",
    "extract_prelink_paths",
    "prelink_candidates",
]
