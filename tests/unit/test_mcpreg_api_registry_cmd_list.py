"""Unit tests for mcpreg.api.registry.cmd_list."""

import pytest

from mcpreg.api.registry.cmd_list import cmd_list
from tests.unit.conftest import README_URL, FakeResponse, numbered_readme, run_cmd

pytestmark = pytest.mark.registry


def test_cmd_list_last_page(fake_http, mcpreg_config):
    fake_http.add(README_URL, FakeResponse(numbered_readme(25)))
    result = run_cmd(cmd_list, limit=20, offset=20, config=mcpreg_config)

    assert result.success is True
    assert result.output["showing"] == 5
    assert result.output["total_servers"] == 25
    assert result.output["has_more"] is False
    assert [s["name"] for s in result.output["servers"]] == [f"server-{i}" for i in range(20, 25)]


def test_cmd_list_first_page_has_more(fake_http, mcpreg_config):
    fake_http.add(README_URL, FakeResponse(numbered_readme(50)))
    result = run_cmd(cmd_list, config=mcpreg_config)

    assert result.output["showing"] == 20
    assert result.output["offset"] == 0
    assert result.output["limit"] == 20
    assert result.output["has_more"] is True


def test_cmd_list_limit_clamped(fake_http, mcpreg_config):
    fake_http.add(README_URL, FakeResponse(numbered_readme(150)))
    result = run_cmd(cmd_list, limit=1000, config=mcpreg_config)
    assert result.output["limit"] == 100
    assert result.output["showing"] == 100


def test_cmd_list_category(sample_readme, mcpreg_config):
    result = run_cmd(cmd_list, category="community", config=mcpreg_config)
    assert result.output["total_servers"] == 4
    assert result.output["category_filter"] == "community"


def test_cmd_list_offset_past_end(sample_readme, mcpreg_config):
    result = run_cmd(cmd_list, offset=100, config=mcpreg_config)
    assert result.success is True
    assert result.output["servers"] == []
    assert result.output["has_more"] is False


def test_cmd_list_empty_document(fake_http, mcpreg_config):
    fake_http.add(README_URL, FakeResponse("# Nothing here\n"))
    result = run_cmd(cmd_list, config=mcpreg_config)
    assert result.success is True
    assert result.output["total_servers"] == 0


def test_cmd_list_fetch_failure(fake_http, mcpreg_config):
    result = run_cmd(cmd_list, config=mcpreg_config)
    assert result.success is False
    assert result.output["has_more"] is False
    assert result.output["errors"]
