"""Observability - log output configuration."""

from .logging import ROOT_LOGGER, ConsoleFormatter, JsonFormatter, configure_from_settings, configure_logging

__all__ = ["ROOT_LOGGER", "ConsoleFormatter", "JsonFormatter", "configure_logging", "configure_from_settings"]
