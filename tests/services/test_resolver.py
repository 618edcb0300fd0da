"""Tests for ResolverService: lookup, validation, template selection, encoding."""

from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from cfurl.config.settings import CfurlSettings
from cfurl.domain.catalog import COMMANDS
from cfurl.domain.models import ResolvedRequest
from cfurl.domain.types import Arity, ErrorCode
from cfurl.services.resolver import ResolverService
from cfurl.services.result import ServiceResult

BASE = "https://dash.cloudflare.com"

NO_ZONE_COMMANDS = sorted(name for name, spec in COMMANDS.items() if not spec.takes_zone)
ZONE_COMMANDS = sorted(name for name, spec in COMMANDS.items() if spec.zone is Arity.REQUIRED)


@pytest.fixture
def resolver(settings: CfurlSettings) -> ResolverService:
    return ResolverService(settings)


def _url(result: ServiceResult) -> str:
    assert result.ok, result.error
    return result.data["url"]


def _code(result: ServiceResult) -> str:
    assert not result.ok
    assert result.error is not None
    return result.error.code


class TestProperties:
    @pytest.mark.parametrize("command", NO_ZONE_COMMANDS)
    def test_no_argument_resolution_is_complete(
        self, resolver: ResolverService, command: str
    ) -> None:
        url = _url(resolver.resolve(command))
        assert url.startswith(BASE)
        assert "{" not in url
        assert "}" not in url

    @pytest.mark.parametrize("command", ZONE_COMMANDS)
    def test_zone_commands_require_zone(self, resolver: ResolverService, command: str) -> None:
        result = resolver.resolve(command)
        assert _code(result) == ErrorCode.MISSING_REQUIRED_ARGUMENT
        assert result.data == {}

    @pytest.mark.parametrize("command", ZONE_COMMANDS)
    def test_zone_commands_with_zone(self, resolver: ResolverService, command: str) -> None:
        url = _url(resolver.resolve(command, ResolvedRequest(zone="example.com")))
        assert "example.com" in url
        assert "{" not in url

    @pytest.mark.parametrize("command", sorted(COMMANDS))
    def test_idempotent(self, resolver: ResolverService, command: str) -> None:
        request = ResolvedRequest(zone="example.com") if COMMANDS[command].takes_zone else None
        first = resolver.resolve(command, request)
        second = resolver.resolve(command, request)
        assert first.model_dump_json() == second.model_dump_json()


class TestScenarios:
    def test_dns(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("dns", ResolvedRequest(zone="miguel.build")))
        assert url == f"{BASE}/?to=/:account/miguel.build/dns"

    def test_workers_overview(self, resolver: ResolverService) -> None:
        assert _url(resolver.resolve("workers")) == f"{BASE}/?to=/:account/workers-and-pages"

    def test_specific_worker(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("workers", ResolvedRequest(resource="my-worker")))
        assert url == f"{BASE}/?to=/:account/workers/services/view/my-worker"

    def test_kv(self, resolver: ResolverService) -> None:
        assert _url(resolver.resolve("kv")) == f"{BASE}/?to=/:account/workers/kv"

    def test_zone_overview(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("zone", ResolvedRequest(zone="miguel.build")))
        assert url == f"{BASE}/?to=/:account/miguel.build"

    def test_dash_root(self, resolver: ResolverService) -> None:
        assert _url(resolver.resolve("dash")) == BASE

    def test_api_tokens_is_profile_scoped(self, resolver: ResolverService) -> None:
        assert _url(resolver.resolve("api-tokens")) == f"{BASE}/profile/api-tokens"

    def test_r2_bucket(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("r2", ResolvedRequest(resource="assets")))
        assert url == f"{BASE}/?to=/:account/r2/default/buckets/assets"

    def test_d1_database(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("d1", ResolvedRequest(resource="prod")))
        assert url == f"{BASE}/?to=/:account/workers/d1/databases/prod"

    def test_alias_resolves_to_primary(self, resolver: ResolverService) -> None:
        result = resolver.resolve("zt")
        assert result.data["command"] == "zero-trust"
        assert _url(result) == _url(resolver.resolve("zero-trust"))

    def test_result_reports_template(self, resolver: ResolverService) -> None:
        result = resolver.resolve("dns", ResolvedRequest(zone="example.com"))
        assert result.op == "resolve"
        assert result.data["command"] == "dns"
        assert result.data["template"] == "/:account/{zone}/dns"


class TestSecuritySections:
    def _resolve(self, resolver: ResolverService, section: str | None) -> ServiceResult:
        return resolver.resolve("security", ResolvedRequest(zone="example.com", section=section))

    def test_sections_are_distinct(self, resolver: ResolverService) -> None:
        default = _url(self._resolve(resolver, None))
        waf = _url(self._resolve(resolver, "waf"))
        events = _url(self._resolve(resolver, "events"))
        assert len({default, waf, events}) == 3
        assert default.endswith("/example.com/security")
        assert waf.endswith("/example.com/security/waf")
        assert events.endswith("/example.com/security/events")

    def test_invalid_section(self, resolver: ResolverService) -> None:
        result = self._resolve(resolver, "bogus")
        assert _code(result) == ErrorCode.INVALID_FLAG_VALUE
        assert result.error is not None
        assert "bogus" in result.error.message
        assert result.error.detail["choices"] == list(COMMANDS["security"].sections)

    def test_missing_zone_wins_over_bad_section(self, resolver: ResolverService) -> None:
        result = resolver.resolve("security", ResolvedRequest(section="bogus"))
        assert _code(result) == ErrorCode.MISSING_REQUIRED_ARGUMENT

    @pytest.mark.parametrize("blank", ["", "  "])
    def test_blank_section_is_invalid(self, resolver: ResolverService, blank: str) -> None:
        result = self._resolve(resolver, blank)
        assert _code(result) == ErrorCode.INVALID_FLAG_VALUE


class TestEncoding:
    @pytest.mark.parametrize("name", ["my bucket", "a/b", "what?", "x#y", "100%"])
    def test_resource_survives_deep_link(self, resolver: ResolverService, name: str) -> None:
        url = _url(resolver.resolve("r2", ResolvedRequest(resource=name)))
        parsed = urlsplit(url)
        assert parsed.fragment == ""
        (target,) = parse_qs(parsed.query)["to"]
        assert target.startswith("/:account/r2/default/buckets/")
        segment = target.rsplit("/", 1)[1]
        assert unquote(segment) == name

    @pytest.mark.parametrize("name", ["a/b", "x#y", "my bucket"])
    def test_resource_in_direct_link(self, name: str) -> None:
        settings = CfurlSettings(dashboard={"account_id": "abc123"})
        url = _url(ResolverService(settings).resolve("r2", ResolvedRequest(resource=name)))
        prefix = f"{BASE}/abc123/r2/default/buckets/"
        assert url.startswith(prefix)
        assert unquote(url.removeprefix(prefix)) == name

    def test_space_is_encoded_twice_in_deep_link(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("r2", ResolvedRequest(resource="my bucket")))
        assert url.endswith("/buckets/my%2520bucket")

    def test_zone_is_encoded(self, resolver: ResolverService) -> None:
        url = _url(resolver.resolve("dns", ResolvedRequest(zone="bad zone?")))
        (target,) = parse_qs(urlsplit(url).query)["to"]
        assert target == "/:account/bad%20zone%3F/dns"


class TestFailures:
    def test_unknown_command(self, resolver: ResolverService) -> None:
        result = resolver.resolve("foo")
        assert _code(result) == ErrorCode.UNKNOWN_COMMAND
        assert result.error is not None
        assert result.error.message == "unknown command 'foo'; run with --help"

    def test_ambiguous_arguments(self, resolver: ResolverService) -> None:
        result = resolver.resolve("dns", ResolvedRequest(zone="example.com", resource="x"))
        assert _code(result) == ErrorCode.AMBIGUOUS_ARGUMENTS

    def test_extra_argument_on_no_argument_command(self, resolver: ResolverService) -> None:
        result = resolver.resolve("kv", ResolvedRequest(extra=("foo",)))
        assert _code(result) == ErrorCode.UNEXPECTED_ARGUMENT
        assert result.error is not None
        assert "takes no arguments" in result.error.message

    def test_extra_argument_after_zone(self, resolver: ResolverService) -> None:
        result = resolver.resolve("dns", ResolvedRequest(zone="example.com", extra=("b",)))
        assert _code(result) == ErrorCode.UNEXPECTED_ARGUMENT
        assert result.error is not None
        assert result.error.detail["extra"] == ["b"]

    def test_zone_for_non_zone_command(self, resolver: ResolverService) -> None:
        result = resolver.resolve("workers", ResolvedRequest(zone="example.com"))
        assert _code(result) == ErrorCode.UNEXPECTED_ARGUMENT

    def test_resource_for_no_argument_command(self, resolver: ResolverService) -> None:
        result = resolver.resolve("kv", ResolvedRequest(resource="ns"))
        assert _code(result) == ErrorCode.UNEXPECTED_ARGUMENT

    def test_section_for_command_without_sections(self, resolver: ResolverService) -> None:
        result = resolver.resolve("dns", ResolvedRequest(zone="example.com", section="waf"))
        assert _code(result) == ErrorCode.UNEXPECTED_ARGUMENT

    def test_blank_zone_counts_as_missing(self, resolver: ResolverService) -> None:
        result = resolver.resolve("dns", ResolvedRequest(zone="  "))
        assert _code(result) == ErrorCode.MISSING_REQUIRED_ARGUMENT


class TestDashboardSettings:
    def test_account_id_gives_direct_links(self) -> None:
        settings = CfurlSettings.from_cli(dashboard={"account_id": "abc123"})
        url = _url(ResolverService(settings).resolve("dns", ResolvedRequest(zone="example.com")))
        assert url == f"{BASE}/abc123/example.com/dns"

    def test_custom_base_url(self) -> None:
        settings = CfurlSettings.from_cli(dashboard={"base_url": "https://dash.example.test/"})
        assert _url(ResolverService(settings).resolve("dash")) == "https://dash.example.test"
