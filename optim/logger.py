# Optim Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Optim."""
import logging

logger: logging.Logger = logging.getLogger("optim")
