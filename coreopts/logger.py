# Coreopts CLI Options — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for coreopts."""
import logging

logger: logging.Logger = logging.getLogger("coreopts")
