"""Tests for CatalogService and argument descriptions."""

import pytest

from cfurl.config.settings import CfurlSettings
from cfurl.domain.catalog import COMMANDS
from cfurl.services.catalog import CatalogService, describe_arguments


@pytest.mark.parametrize(
    "name,expected",
    [("dns", "ZONE"), ("r2", "[BUCKET]"), ("d1", "[DATABASE]"), ("workers", "[NAME]"), ("kv", "")],
)
def test_describe_arguments(name: str, expected: str) -> None:
    assert describe_arguments(COMMANDS[name]) == expected


class TestListCommands:
    def test_lists_every_command_in_order(self, settings: CfurlSettings) -> None:
        result = CatalogService(settings).list_commands()
        assert result.ok
        assert result.op == "list_commands"
        assert result.data["count"] == len(COMMANDS)
        assert [item["name"] for item in result.data["items"]] == list(COMMANDS)

    def test_item_shape(self, settings: CfurlSettings) -> None:
        items = {i["name"]: i for i in CatalogService(settings).list_commands().data["items"]}
        security = items["security"]
        assert security["arguments"] == "ZONE"
        assert "waf" in security["sections"]
        assert items["zero-trust"]["aliases"] == ["zt"]
        assert items["kv"]["summary"] == COMMANDS["kv"].summary
