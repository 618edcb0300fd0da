"""LauncherService: hand a resolved URL to the default browser.

The hand-off is fire-and-forget. A failed launch is surfaced as
``LAUNCHER_FAILURE`` and never retried.
"""

from __future__ import annotations

import logging

import click

from cfurl.domain.types import ErrorCode
from cfurl.services.base import BaseService
from cfurl.services.result import ServiceResult, failure

logger = logging.getLogger(__name__)

OP = "open"


class LauncherService(BaseService):
    """Opens resolved dashboard URLs via ``click.launch``."""

    def launch(self, resolved: ServiceResult) -> ServiceResult:
        """Open the URL carried by a successful resolve result.

        Failed resolve results are passed through unchanged.
        """
        if not resolved.ok:
            return resolved

        url = resolved.data["url"]
        command = resolved.data.get("command", "")
        logger.debug("Launching browser for %s", url)
        try:
            status = click.launch(url)
        except OSError as exc:
            logger.debug("Browser launch raised", exc_info=True)
            return failure(
                OP,
                ErrorCode.LAUNCHER_FAILURE,
                f"failed to open browser: {exc}",
                url=url,
                command=command,
            )
        if status != 0:
            return failure(
                OP,
                ErrorCode.LAUNCHER_FAILURE,
                f"failed to open browser (exit status {status})",
                url=url,
                command=command,
                status=status,
            )
        return ServiceResult(
            ok=True,
            op=OP,
            data={"command": command, "url": url, "opened": True},
            warnings=list(resolved.warnings),
        )
