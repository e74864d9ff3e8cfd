# -*- coding: utf-8 -*-
"""Project version helpers."""

from __future__ import annotations

from functools import lru_cache
from importlib import metadata

DIST_NAME = "cornfarm"


@lru_cache(maxsize=1)
def project_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"
