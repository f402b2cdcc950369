"""
Optim Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .config import OptimSettings, load_settings
from .exceptions import OptimError
from .session import FinishStatus, Optim, start

logger = logging.getLogger("optim")


__all__ = [
    "Optim",
    "FinishStatus",
    "OptimSettings",
    "OptimError",
    "load_settings",
    "start",
]
