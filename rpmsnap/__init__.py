"""rpmsnap - package inventory snapshots with keep-on-change retention."""

__version__ = "1.0.0"
