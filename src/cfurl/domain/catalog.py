"""The dashboard command catalog.

Adding a dashboard page is a pure data edit: append a :class:`CommandSpec`
to ``_SPECS``. Name and alias uniqueness is checked when the module loads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from cfurl.domain.models import CommandSpec
from cfurl.domain.types import Arity

DEFAULT_BASE_URL = "https://dash.cloudflare.com"

SECURITY_SECTIONS = ("waf", "events", "ddos", "bots")


def _zone(name: str, path: str, summary: str, **kwargs: Any) -> CommandSpec:
    """A command scoped to a single zone."""
    suffix = f"/{path}" if path else ""
    return CommandSpec(
        name=name,
        summary=summary,
        zone=Arity.REQUIRED,
        template=f"/:account/{{zone}}{suffix}",
        **kwargs,
    )


def _account(name: str, path: str, summary: str, **kwargs: Any) -> CommandSpec:
    """An account-level command with no arguments."""
    suffix = f"/{path}" if path else ""
    return CommandSpec(name=name, summary=summary, template=f"/:account{suffix}", **kwargs)


def _named(name: str, path: str, item_path: str, label: str, summary: str) -> CommandSpec:
    """An account-level command with an optional resource name."""
    return CommandSpec(
        name=name,
        summary=summary,
        resource=Arity.OPTIONAL,
        resource_label=label,
        template=f"/:account/{path}",
        qualified_template=f"/:account/{item_path}/{{resource}}",
    )


_SPECS: list[CommandSpec] = [
    # --- Zone-scoped ---
    _zone("dns", "dns", "Open DNS settings for a zone."),
    _zone(
        "security",
        "security",
        "Open security settings (WAF, events, DDoS, bots) for a zone.",
        section_template="/:account/{zone}/security/{section}",
        sections=SECURITY_SECTIONS,
    ),
    _zone("ssl", "ssl-tls", "Open SSL/TLS settings for a zone."),
    _zone("caching", "caching", "Open caching settings for a zone."),
    _zone("rules", "rules", "Open rules (redirects, transforms) for a zone."),
    _zone("speed", "speed", "Open speed/optimization settings for a zone."),
    _zone("email", "email", "Open email routing settings for a zone."),
    _zone("zaraz", "zaraz", "Open Zaraz for a zone."),
    _zone("zone", "", "Open the zone overview."),
    _zone("spectrum", "spectrum", "Open Spectrum settings for a zone."),
    _zone("network", "network", "Open network settings for a zone."),
    _zone("traffic", "traffic", "Open traffic settings (load balancing, health checks)."),
    _zone("scrape", "content-protection", "Open scrape shield settings for a zone."),
    _zone("zone-analytics", "analytics", "Open analytics for a zone."),
    _zone("zone-logs", "analytics/logs", "Open Logpush settings for a zone."),
    # --- Optional resource name ---
    _named(
        "workers",
        "workers-and-pages",
        "workers/services/view",
        "NAME",
        "Open Workers & Pages, or a specific worker.",
    ),
    _named("r2", "r2", "r2/default/buckets", "BUCKET", "Open R2 object storage, or a bucket."),
    _named("d1", "workers/d1", "workers/d1/databases", "DATABASE", "Open D1, or a database."),
    # --- Account-level, no arguments ---
    _account("kv", "workers/kv", "Open KV namespaces."),
    _account("zero-trust", "access", "Open the Zero Trust dashboard.", aliases=("zt",)),
    _account("access", "access", "Open Access settings."),
    _account("tunnels", "access/tunnels", "Open Cloudflare Tunnels."),
    _account("pages", "workers-and-pages", "Open the Pages dashboard."),
    _account("stream", "stream", "Open Cloudflare Stream."),
    _account("images", "images", "Open Cloudflare Images."),
    _account("queues", "queues", "Open Queues."),
    _account("ai", "ai", "Open Workers AI."),
    _account("vectorize", "vectorize", "Open Vectorize."),
    _account("hyperdrive", "hyperdrive", "Open Hyperdrive."),
    _account(
        "durable-objects",
        "workers/durable-objects",
        "Open Durable Objects.",
        aliases=("do",),
    ),
    _account("account", "", "Open account settings."),
    _account("billing", "billing", "Open the billing page."),
    _account("audit-log", "audit-log", "Open the audit log.", aliases=("audit",)),
    CommandSpec(
        name="api-tokens",
        summary="Open the API tokens page.",
        template="/profile/api-tokens",
        aliases=("tokens",),
    ),
    _account("registrar", "domains", "Open the domain registrar.", aliases=("domains",)),
    _account("turnstile", "turnstile", "Open Turnstile."),
    _account("analytics", "analytics", "Open account analytics."),
    _account("web-analytics", "web-analytics", "Open Web Analytics.", aliases=("wa",)),
    _account("logs", "logs", "Open account-level logs (Logpush)."),
    CommandSpec(name="dash", summary="Open the main dashboard.", template="", aliases=("home",)),
]


def build_catalog(specs: Iterable[CommandSpec]) -> Mapping[str, CommandSpec]:
    """Index *specs* by primary name, rejecting duplicate names or aliases.

    Returns a read-only mapping in declaration order.
    """
    catalog: dict[str, CommandSpec] = {}
    seen: set[str] = set()
    for spec in specs:
        for name in spec.names():
            if name in seen:
                msg = f"Duplicate command name or alias: {name!r}"
                raise ValueError(msg)
            seen.add(name)
        catalog[spec.name] = spec
    return MappingProxyType(catalog)


COMMANDS: Mapping[str, CommandSpec] = build_catalog(_SPECS)

_ALIASES: Mapping[str, str] = MappingProxyType(
    {alias: spec.name for spec in COMMANDS.values() for alias in spec.aliases}
)


def get_command_spec(name: str) -> CommandSpec | None:
    """Look up a command by name or alias."""
    spec = COMMANDS.get(name)
    if spec is not None:
        return spec
    primary = _ALIASES.get(name)
    return COMMANDS[primary] if primary is not None else None
