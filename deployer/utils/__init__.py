"""Utility functions for Repo Deployer."""

from deployer.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
