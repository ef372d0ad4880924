"""Multi-chain wallet balance watcher with webhook notifications."""

__version__ = "1.0.0"
