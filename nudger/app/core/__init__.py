"""Shared core values for the nudger service."""

SERVICE_NAME = "nudger"
