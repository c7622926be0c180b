"""Tests for tool registration, category selection and dispatch."""

import json
import logging

import pytest
from pydantic import BaseModel, ConfigDict

from wordpress_rest_mcp.errors import TransportError, UnknownToolError
from wordpress_rest_mcp.registry import (
    READ_ONLY,
    ToolCategory,
    ToolDescriptor,
    ToolOutcome,
    ToolRegistry,
    select_category,
)
from wordpress_rest_mcp.tools import TOOL_GROUPS, build_registry, fluent_crm


class EchoInput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    value: int = 1


def descriptor(name, error_context="echoing"):
    return ToolDescriptor(
        name=name,
        description="Echo the input.",
        input_model=EchoInput,
        error_context=error_context,
        annotations=READ_ONLY,
    )


def registry_with(handler, name="echo", error_context="echoing"):
    registry = ToolRegistry()
    registry.register([descriptor(name, error_context)], {name: handler})
    return registry


class TestSelectCategory:
    """Tests for ENABLED_TOOLS parsing."""

    def test_empty_selects_all(self):
        assert select_category("") is ToolCategory.ALL
        assert select_category(None) is ToolCategory.ALL
        assert select_category("all") is ToolCategory.ALL

    def test_aliases(self):
        assert select_category("fluent-crm") is ToolCategory.FLUENTCRM
        assert select_category(" FluentCart ") is ToolCategory.FLUENTCART
        assert select_category("wp") is ToolCategory.WORDPRESS

    def test_unknown_falls_back_to_all_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wordpress_rest_mcp"):
            assert select_category("bogus") is ToolCategory.ALL
        assert "Unknown ENABLED_TOOLS value" in caplog.text


class TestBuildRegistry:
    """Tests for build_registry."""

    def test_fluentcrm_only(self):
        registry = build_registry("fluentcrm")
        assert sorted(registry.names()) == sorted(t.name for t in fluent_crm.TOOLS)
        assert "list_content" not in registry

    def test_all_is_union_of_groups(self):
        registry = build_registry("all")
        expected = [
            tool.name
            for modules in TOOL_GROUPS.values()
            for module in modules
            for tool in module.TOOLS
        ]
        assert registry.names() == expected

    def test_every_tool_has_handler(self):
        """Each module pairs its descriptors 1:1 with handlers."""
        for modules in TOOL_GROUPS.values():
            for module in modules:
                assert {t.name for t in module.TOOLS} == set(module.HANDLERS)

    def test_names_are_unique(self):
        registry = build_registry("all")
        assert len(registry.names()) == len(set(registry.names()))


class TestToolRegistry:
    """Tests for ToolRegistry bookkeeping."""

    def test_descriptor_without_handler_is_skipped(self, caplog):
        registry = ToolRegistry()
        with caplog.at_level(logging.WARNING, logger="wordpress_rest_mcp"):
            count = registry.register([descriptor("orphan")], {})
        assert count == 0
        assert "No handler for tool: orphan" in caplog.text
        assert len(registry) == 0

    def test_duplicate_name_rejected(self):
        async def handler(params, ctx):
            return {}

        registry = registry_with(handler)
        with pytest.raises(ValueError, match="Duplicate tool name"):
            registry.register([descriptor("echo")], {"echo": handler})

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownToolError):
            ToolRegistry().get("nope")

    def test_list_tools_uses_model_schema(self):
        async def handler(params, ctx):
            return {}

        (tool,) = registry_with(handler).list_tools()
        assert tool.name == "echo"
        assert "value" in tool.inputSchema["properties"]
        assert tool.annotations.readOnlyHint is True


class TestInvoke:
    """Every invocation ends in a ToolOutcome."""

    @pytest.mark.asyncio
    async def test_success_is_indented_json(self):
        async def handler(params, ctx):
            return {"value": params.value}

        outcome = await registry_with(handler).invoke("echo", {"value": 3}, None)

        assert outcome.success
        assert outcome.text == json.dumps({"value": 3}, indent=2)

    @pytest.mark.asyncio
    async def test_transport_error(self):
        async def handler(params, ctx):
            raise TransportError("Sorry, you are not allowed to do that.", status=403)

        outcome = await registry_with(handler).invoke("echo", {}, None)

        assert outcome.is_error
        assert outcome.text == "Error echoing: Sorry, you are not allowed to do that."

    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        async def handler(params, ctx):
            raise KeyError("id")

        outcome = await registry_with(handler).invoke("echo", {}, None)

        assert outcome.is_error
        assert outcome.text == "Error echoing: id"

    @pytest.mark.asyncio
    async def test_empty_message_is_never_blank(self):
        async def handler(params, ctx):
            raise RuntimeError()

        outcome = await registry_with(handler, error_context=None).invoke("echo", {}, None)

        assert outcome.text == "Error: RuntimeError"

    @pytest.mark.asyncio
    async def test_validation_error(self):
        called = []

        async def handler(params, ctx):
            called.append(params)

        outcome = await registry_with(handler).invoke("echo", {"unknown": 1}, None)

        assert outcome.is_error
        assert outcome.text.startswith("Error echoing:")
        assert called == []

    @pytest.mark.asyncio
    async def test_outcome_passes_through(self):
        async def handler(params, ctx):
            return ToolOutcome.error("custom")

        outcome = await registry_with(handler).invoke("echo", None, None)

        assert outcome.is_error
        assert outcome.text == "custom"

    @pytest.mark.asyncio
    async def test_unknown_tool(self):
        outcome = await ToolRegistry().invoke("does_not_exist", {}, None)

        assert outcome.is_error
        assert outcome.text == "Tool not found: does_not_exist"

    @pytest.mark.asyncio
    async def test_list_terms_round_trip(self, tool_context, fake_client):
        """list_terms for category queries wp/v2/categories without the taxonomy key."""
        fake_client.routes[("GET", "wp/v2/categories")] = [{"id": 1, "name": "News"}]
        registry = build_registry("wordpress")

        outcome = await registry.invoke(
            "list_terms", {"taxonomy": "category", "per_page": 5}, tool_context
        )

        assert outcome.success
        assert json.loads(outcome.text) == [{"id": 1, "name": "News"}]
        method, path, data, _ = fake_client.calls[-1]
        assert (method, path) == ("GET", "wp/v2/categories")
        assert data == {"per_page": 5}

    def test_call_tool_result_shape(self):
        result = ToolOutcome.error("bad").to_call_tool_result()
        assert result.isError is True
        assert result.content[0].type == "text"
        assert result.content[0].text == "bad"
