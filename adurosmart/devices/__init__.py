"""Vendor device catalogues."""

from __future__ import annotations

import importlib
import logging
import pkgutil

_LOGGER = logging.getLogger(__name__)


def setup() -> None:
    """Import every vendor module so its definitions register themselves."""
    for module_info in pkgutil.iter_modules(__path__, prefix=f"{__name__}."):
        _LOGGER.debug("Loading device definitions from %s", module_info.name)
        importlib.import_module(module_info.name)
