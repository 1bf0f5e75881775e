#!/usr/bin/env python3
"""
CLI entry point for the Stellar REPL (stellar command).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, Optional, Sequence

from stellar_shell.cli.completion import CompletionEngine
from stellar_shell.cli.dispatcher import Dispatcher
from stellar_shell.cli.output import ConsoleOutput
from stellar_shell.config import (
    DEFAULTS,
    get_config_manager,
    load_global_config,
    load_properties,
    load_variables,
    validate_options,
)
from stellar_shell.core import ConfigError, FunctionRegistry
from stellar_shell.engine import StellarExecutor
from stellar_shell.functions import load_functions_async
from stellar_shell.utils.logging import configure_logging

if TYPE_CHECKING:
    from stellar_shell.cli.output import Output
    from stellar_shell.engine import Executor

logger = logging.getLogger(__name__)

WELCOME = (
    "Stellar, Go!\n"
    "Please note that functions are loading lazily in the background "
    "and will be unavailable until loaded fully."
)


class StellarShell:
    """Wires an executor to the dispatcher, completion engine and a REPL."""

    def __init__(
        self,
        executor: "Executor",
        output: Optional["Output"] = None,
        ansi: bool = True,
    ):
        self.executor = executor
        self.ansi = ansi
        self.output = output or ConsoleOutput(ansi=ansi)
        self.dispatcher = Dispatcher(executor, self.output, on_stop=self.on_stop)
        self.completion = CompletionEngine(executor)
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def on_start(self) -> None:
        """Print the welcome banner and the global config, if there is one."""
        self.output.write_line(WELCOME)
        global_config = self.executor.global_config
        if global_config is not None:
            self.output.write_line(json.dumps(global_config, indent=2, default=str))

    def on_stop(self) -> None:
        """Stop the REPL loop after the current line."""
        logger.debug("Stop requested")
        self._running = False

    def stop(self) -> None:
        self.on_stop()

    def run(self, simple: bool = False) -> None:
        """Print the banner and run a REPL until stopped."""
        if simple:
            from stellar_shell.cli._simple_repl import repl
        else:
            from stellar_shell.cli._repl import repl

        self._running = True
        self.on_start()
        repl(self)


def print_config():
    """Print current configuration."""
    cfg_mgr = get_config_manager()
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"  {key}: {value}")

    print("\nSet with: stellar --set-config key=value")
    print()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from the config file."""
    cfg = get_config_manager().config

    parser = argparse.ArgumentParser(
        prog="stellar",
        description="Interactive shell for Stellar expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Config file: {get_config_manager().CONFIG_FILE}

Examples:
    stellar                            # Start the shell
    stellar -v vars.json               # Seed variables from a JSON map
    stellar -p stellar.properties      # Use a properties file
    stellar --simple                   # Use the readline-based REPL
    stellar --set-config no_ansi=true  # Disable colors by default
        """,
    )
    parser.add_argument("-v", "--variables", metavar="FILE",
                        default=cfg.get("variables_file"),
                        help="File containing a JSON Map of variables")
    parser.add_argument("-p", "--properties", metavar="FILE",
                        default=cfg.get("properties_file"),
                        help="File containing Stellar properties")
    parser.add_argument("-g", "--global-config", metavar="FILE",
                        default=cfg.get("global_config_file"),
                        help="File containing the global configuration as JSON")
    parser.add_argument("-na", "--no-ansi", action="store_true",
                        default=cfg.get("no_ansi"),
                        help="Make the input prompt not use ANSI colors.")
    parser.add_argument("--simple", action="store_true",
                        default=cfg.get("simple"),
                        help="Use simple REPL (no prompt_toolkit features)")
    parser.add_argument("--verbose", action="store_true",
                        default=cfg.get("verbose"),
                        help="Log debug output to stderr")
    parser.add_argument("--log-file", metavar="FILE",
                        default=cfg.get("log_file"),
                        help="Also write logs to this file")

    # Config management
    parser.add_argument("--config", action="store_true",
                        help="Show current configuration")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help="Set a config value")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Unset a config value (reset to default)")
    return parser


def create_shell(args: argparse.Namespace) -> StellarShell:
    """Create the executor and shell described by parsed arguments.

    Raises:
        ConfigError: If a file given on the command line is missing or invalid.
    """
    validate_options(
        variables_file=args.variables,
        properties_file=args.properties,
        global_config_file=args.global_config,
    )

    properties = load_properties(args.properties)
    global_config = load_global_config(args.global_config) if args.global_config else None

    registry = FunctionRegistry()
    executor = StellarExecutor(registry, properties=properties, global_config=global_config)
    load_functions_async(registry)

    if args.variables:
        for name, value in load_variables(args.variables).items():
            executor.assign(name, None, value)

    return StellarShell(executor, ansi=not args.no_ansi)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the stellar CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg_mgr = get_config_manager()

    if args.config:
        print_config()
        return 0

    if args.set_config:
        try:
            key, value = args.set_config.split("=", 1)
            cfg_mgr.set(key.strip(), value.strip())
            print(f"Set {key.strip()} = {value.strip()}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
            print(f"Unset {args.unset_config}")
            print(f"Saved to {cfg_mgr.CONFIG_FILE}")
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file, ansi=not args.no_ansi)

    try:
        shell = create_shell(args)
    except (ConfigError, OSError) as e:
        print(e)
        return 1

    shell.run(simple=bool(args.simple))
    return 0


if __name__ == "__main__":
    sys.exit(main())
