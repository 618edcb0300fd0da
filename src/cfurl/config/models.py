"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, cfurl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from cfurl.domain.catalog import DEFAULT_BASE_URL


class DashboardConfig(BaseModel):
    """[dashboard] section."""

    model_config = {"frozen": True}

    base_url: str = DEFAULT_BASE_URL
    account_id: str = ""


class LauncherConfig(BaseModel):
    """[launcher] section."""

    model_config = {"frozen": True}

    open_browser: bool = True
