# Commandeer CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Commandeer."""
import logging

logger = logging.getLogger("commandeer")
