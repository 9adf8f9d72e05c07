from __future__ import annotations


class IntrospectorError(Exception):
	"""Base class for errors raised while producing a project report."""


class ConfigurationError(IntrospectorError):
	"""Raised for bad run inputs: missing root, unusable filter pattern."""
