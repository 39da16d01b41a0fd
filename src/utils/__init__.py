"""Shared utilities: logging, exceptions and validation."""
