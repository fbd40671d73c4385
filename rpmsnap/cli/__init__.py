"""Command line interface for rpmsnap."""
