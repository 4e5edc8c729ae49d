"""Tests for the command-line interface."""

import importlib.util
import json
import os

import pytest

CLI_PATH = os.path.join(os.path.dirname(__file__), "..", "scripts", "cli", "link_shortener_cli.py")


@pytest.fixture(scope="module")
def cli_module():
    spec = importlib.util.spec_from_file_location("link_shortener_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
class TestCLI:
    """Run CLI commands against the in-memory store."""
    
    async def test_shorten(self, cli_module, capsys):
        exit_code = await cli_module.main(["--db-url", "memory://", "shorten", "http://a.com"])
        
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"]
        assert output["abbreviation"] == "cm"
    
    async def test_shorten_invalid(self, cli_module, capsys):
        exit_code = await cli_module.main(["--db-url", "memory://", "shorten", "not-a-url"])
        
        assert exit_code == 1
        output = json.loads(capsys.readouterr().err)
        assert "url" in output["field_errors"]
    
    async def test_resolve_unknown(self, cli_module, capsys):
        exit_code = await cli_module.main(["--db-url", "memory://", "resolve", "missing"])
        
        assert exit_code == 1
        assert "not found" in capsys.readouterr().err
    
    async def test_delete_unknown(self, cli_module):
        assert await cli_module.main(["--db-url", "memory://", "delete", "missing"]) == 1
    
    async def test_list_and_health(self, cli_module, capsys):
        assert await cli_module.main(["--db-url", "memory://", "list"]) == 0
        assert json.loads(capsys.readouterr().out)["count"] == 0
        
        assert await cli_module.main(["--db-url", "memory://", "health"]) == 0
    
    async def test_no_command(self, cli_module):
        assert await cli_module.main([]) == 1
