from __future__ import annotations

import pytest

from pdfrelay.exceptions import InvalidOptionError
from pdfrelay.tools import load_builtin_plugins
from pdfrelay.tools.common.interfaces import BaseTool, TransformContext
from pdfrelay.tools.common.pipeline import ToolRegistry, registry, run_tool

load_builtin_plugins()


class EchoTool(BaseTool):
    name = "echo"

    def run(self) -> dict:
        return dict(self.context.config)


def test_builtin_tools_are_registered() -> None:
    assert registry.names() == [
        "compress",
        "decrypt",
        "encrypt",
        "extract-text",
        "info",
        "merge",
        "rotate",
        "split",
        "watermark",
    ]
    assert "split" in registry
    assert "pdf-to-docx" not in registry


def test_private_registry_runs_its_own_tools() -> None:
    tools = ToolRegistry()
    tools.register("echo", EchoTool)

    assert run_tool("echo", TransformContext(config={"a": 1}), tools=tools) == {"a": 1}
    assert tools.names() == ["echo"]


def test_duplicate_registration_is_rejected() -> None:
    tools = ToolRegistry()
    tools.register("echo", EchoTool)

    with pytest.raises(ValueError):
        tools.register("echo", EchoTool)


def test_unknown_tool_lists_available_names() -> None:
    tools = ToolRegistry()
    tools.register("echo", EchoTool)

    with pytest.raises(InvalidOptionError, match=r"available: echo"):
        run_tool("missing", TransformContext(), tools=tools)
