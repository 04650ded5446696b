"""Ambient configuration, logging and request-context helpers."""
