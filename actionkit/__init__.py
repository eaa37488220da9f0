"""Toolkit for writing GitHub Actions: inputs, workflow commands, state and manifests."""

__version__ = "0.0.13"