"""BaseService: common foundation for cfurl services.

Every service receives the frozen :class:`CfurlSettings` at construction
time and reads its configuration sections from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cfurl.config.settings import CfurlSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ResolverService(BaseService):
            def resolve(self, command: str, ...) -> ServiceResult:
                base_url = self._settings.dashboard.base_url
                ...
    """

    def __init__(self, settings: CfurlSettings) -> None:
        self._settings = settings
