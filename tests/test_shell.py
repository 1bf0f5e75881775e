#!/usr/bin/env python3
"""
Tests for the shell lifecycle and the stellar command line.
"""

import argparse
import json

import pytest
from unittest.mock import MagicMock, patch

import stellar_shell.config.config as config_module
from stellar_shell.cli import shell as shell_module
from stellar_shell.cli.shell import WELCOME, StellarShell, create_shell, main
from stellar_shell.config import ConfigManager
from stellar_shell.engine import StellarExecutor


@pytest.fixture
def isolated_config(tmp_path):
    """Point the config manager at a temporary directory."""
    config_dir = tmp_path / ".stellar"
    config_module._manager = None
    with patch.object(ConfigManager, 'CONFIG_DIR', config_dir):
        with patch.object(ConfigManager, 'CONFIG_FILE', config_dir / "config.json"):
            yield config_dir / "config.json"
    config_module._manager = None


@pytest.fixture
def no_side_effects(tmp_path):
    """Keep create_shell/main away from ~/.stellar and the real logging setup."""
    with patch.object(shell_module, "load_functions_async") as loader, \
            patch.object(shell_module, "configure_logging"), \
            patch("stellar_shell.config.loaders.DEFAULT_PROPERTIES_FILE", tmp_path / "none"):
        yield loader


def make_args(**overrides):
    values = dict(variables=None, properties=None, global_config=None, no_ansi=True)
    values.update(overrides)
    return argparse.Namespace(**values)


# ============================================================================
# Shell Lifecycle Tests
# ============================================================================

class TestStellarShell:
    """Tests for StellarShell."""

    def test_on_start_banner(self, executor, output):
        StellarShell(executor, output).on_start()
        assert output.text == WELCOME + "\n"

    def test_on_start_prints_global_config(self, registry, output):
        executor = StellarExecutor(registry, global_config={"es.ip": "localhost"})
        StellarShell(executor, output).on_start()
        assert output.text.startswith("Stellar, Go!\n")
        assert json.dumps({"es.ip": "localhost"}, indent=2) in output.text

    def test_quit_stops_running_shell(self, executor, output):
        def fake_repl(shell):
            assert shell.running
            shell.dispatcher.dispatch("x := 1")
            shell.dispatcher.dispatch("quit")

        shell = StellarShell(executor, output)
        with patch("stellar_shell.cli._simple_repl.repl", fake_repl):
            shell.run(simple=True)

        assert not shell.running
        assert executor.get_variables() == {"x": 1}

    def test_stop(self, executor, output):
        shell = StellarShell(executor, output)
        shell._running = True
        shell.stop()
        assert not shell.running


# ============================================================================
# create_shell Tests
# ============================================================================

class TestCreateShell:
    """Tests for create_shell()."""

    def test_seeds_variables(self, tmp_path, no_side_effects):
        variables = tmp_path / "vars.json"
        variables.write_text('{"ip": "10.0.0.1", "port": 443}')

        shell = create_shell(make_args(variables=str(variables)))

        assert shell.executor.get_variables() == {"ip": "10.0.0.1", "port": 443}
        assert shell.ansi is False
        no_side_effects.assert_called_once_with(shell.executor.function_registry)

    def test_loads_properties_and_global_config(self, tmp_path, no_side_effects):
        properties = tmp_path / "stellar.properties"
        properties.write_text("a=1\n")
        global_config = tmp_path / "global.json"
        global_config.write_text('{"k": "v"}')

        shell = create_shell(make_args(
            properties=str(properties),
            global_config=str(global_config),
        ))

        assert shell.executor.properties == {"a": "1"}
        assert shell.executor.global_config == {"k": "v"}

    def test_properties_reach_functions(self, tmp_path, no_side_effects, output):
        properties = tmp_path / "stellar.properties"
        properties.write_text("profiler.period = 15\n")
        shell = create_shell(make_args(properties=str(properties)))

        from stellar_shell.functions.loader import load_all_functions
        load_all_functions(shell.executor.function_registry, user_dir=tmp_path)

        shell.output = output
        shell.dispatcher.output = output
        shell.dispatcher.dispatch("PROPERTY_GET('profiler.period')")
        assert output.lines == ["15"]

    def test_missing_file(self, tmp_path, no_side_effects):
        from stellar_shell.core import ConfigError
        with pytest.raises(ConfigError, match="variables file does not exist"):
            create_shell(make_args(variables=str(tmp_path / "missing.json")))
        no_side_effects.assert_not_called()


# ============================================================================
# main() Tests
# ============================================================================

class TestMain:
    """Tests for the stellar command."""

    def test_missing_variables_file(self, tmp_path, isolated_config, no_side_effects, capsys):
        assert main(["-v", str(tmp_path / "missing.json")]) == 1
        assert "variables file does not exist" in capsys.readouterr().out

    def test_invalid_global_config(self, tmp_path, isolated_config, no_side_effects, capsys):
        bad = tmp_path / "global.json"
        bad.write_text("[]")
        assert main(["-g", str(bad)]) == 1
        assert "expected a JSON object" in capsys.readouterr().out

    def test_variables_file_not_utf8(self, tmp_path, isolated_config, no_side_effects, capsys):
        bad = tmp_path / "vars.json"
        bad.write_bytes(b"\xff\xfe\x00")
        assert main(["-v", str(bad)]) == 1
        assert "not UTF-8" in capsys.readouterr().out

    def test_runs_shell(self, isolated_config, no_side_effects):
        run = MagicMock()
        with patch.object(StellarShell, "run", run):
            assert main(["--simple", "-na"]) == 0
        run.assert_called_once_with(simple=True)

    def test_show_config(self, isolated_config, capsys):
        assert main(["--config"]) == 0
        out = capsys.readouterr().out
        assert str(isolated_config) in out
        assert "no_ansi: False" in out

    def test_set_and_unset_config(self, isolated_config, capsys):
        assert main(["--set-config", "no_ansi=true"]) == 0
        assert json.loads(isolated_config.read_text())["no_ansi"] is True

        assert main(["--unset-config", "no_ansi"]) == 0
        assert json.loads(isolated_config.read_text())["no_ansi"] is None

    def test_set_unknown_config(self, isolated_config, capsys):
        assert main(["--set-config", "bogus=1"]) == 1
        assert "Unknown config key" in capsys.readouterr().out

    def test_config_supplies_defaults(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('{"no_ansi": true, "simple": true}')
        args = shell_module.build_parser().parse_args([])
        assert args.no_ansi is True
        assert args.simple is True
