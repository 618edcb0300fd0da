"""Dashboard path templates: placeholder discovery, substitution, URL assembly.

Templates are dashboard paths such as ``/:account/{zone}/dns``. Placeholders
use ``str.format`` syntax and are limited to :data:`PLACEHOLDERS`. The
``:account`` segment is not a placeholder; the dashboard resolves it to the
signed-in account unless an explicit account id is configured.
"""

from __future__ import annotations

from string import Formatter
from urllib.parse import quote

PLACEHOLDERS = frozenset({"zone", "resource", "section"})

ACCOUNT_PREFIX = "/:account"


def placeholders(template: str) -> set[str]:
    """Return the placeholder names referenced by *template*.

    Examples:
        >>> sorted(placeholders("/:account/{zone}/security/{section}"))
        ['section', 'zone']
        >>> placeholders("/:account/workers/kv")
        set()
    """
    return {field for _, field, _, _ in Formatter().parse(template) if field is not None}


def encode_segment(value: str) -> str:
    """Percent-encode a single substituted value, escaping ``/`` as well."""
    return quote(value, safe="")


def render_template(template: str, values: dict[str, str]) -> str:
    """Substitute *values* into *template*, percent-encoding each one.

    Raises:
        KeyError: If the template references a placeholder missing from *values*.
    """
    missing = placeholders(template) - values.keys()
    if missing:
        msg = f"Unresolved placeholder(s) {sorted(missing)} in {template!r}"
        raise KeyError(msg)
    return template.format(**{key: encode_segment(val) for key, val in values.items()})


def build_url(path: str, *, base_url: str, account_id: str = "") -> str:
    """Turn a rendered dashboard path into a full URL.

    An empty path is the dashboard root. Account-scoped paths become
    ``?to=`` deep links, or direct links when *account_id* is known.

    The dashboard unquotes ``to`` before routing, so the deep-link path is
    quoted again as a query value. Segment escapes such as ``%2F`` survive
    as ``%252F``.
    """
    base = base_url.rstrip("/")
    if not path:
        return base
    if path == ACCOUNT_PREFIX or path.startswith(ACCOUNT_PREFIX + "/"):
        if account_id:
            return f"{base}/{encode_segment(account_id)}{path[len(ACCOUNT_PREFIX) :]}"
        return f"{base}/?to={quote(path, safe='/:')}"
    return f"{base}{path}"
