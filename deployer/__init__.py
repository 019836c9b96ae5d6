"""Repo Deployer - deploy GitHub repositories to Render."""

__version__ = "0.1.0"
