"""
Functions loader - discovers Stellar functions and registers them.

Built-in functions live in the modules of this package. Users can add their
own under ~/.stellar/functions/, one module (directory with __init__.py)
per group, using the same decorator as the built-ins:

    # ~/.stellar/functions/greeting/__init__.py
    from stellar_shell.core import stellar_function

    @stellar_function(name="GREET", params=["name - String"], returns="String")
    def greet(name):
        return f"Hello, {name}!"

Loading normally runs in a background thread so the shell can accept
input right away; functions appear in the registry as they are loaded.
"""

from __future__ import annotations

import importlib
import logging
import sys
import threading
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from types import ModuleType

from stellar_shell.core.decorators import get_function_info
from stellar_shell.core.exceptions import FunctionRegistrationError
from stellar_shell.core.registry import FunctionRegistry

logger = logging.getLogger(__name__)

# Default user functions directory
USER_FUNCTIONS_DIR = Path.home() / ".stellar" / "functions"

# Package builtins directory
PACKAGE_FUNCTIONS_DIR = Path(__file__).parent

BUILTIN_PACKAGE = "stellar_shell.functions"


def discover_builtin_modules() -> list[str]:
    """List the importable names of built-in function modules."""
    names = []
    for item in sorted(PACKAGE_FUNCTIONS_DIR.glob("*.py")):
        if item.name.startswith("_") or item.stem == "loader":
            continue
        names.append(f"{BUILTIN_PACKAGE}.{item.stem}")
    return names


def discover_user_modules(functions_dir: Path | None = None) -> list[Path]:
    """
    Discover user function modules in the given directory.

    Args:
        functions_dir: Directory to search (default: ~/.stellar/functions)

    Returns:
        List of __init__.py paths for valid modules.
    """
    functions_dir = functions_dir or USER_FUNCTIONS_DIR

    if not functions_dir.exists():
        return []

    if not functions_dir.is_dir():
        logger.warning(f"Functions path is not a directory: {functions_dir}")
        return []

    paths = []
    for item in sorted(functions_dir.iterdir()):
        # Skip non-directories, hidden, and private
        if not item.is_dir() or item.name.startswith((".", "_")):
            continue

        init_file = item / "__init__.py"
        if init_file.exists():
            paths.append(init_file)
        else:
            logger.debug(f"Skipping {item.name}: no __init__.py")

    return paths


def load_user_module(module_path: Path, prefix: str = "stellar_user_functions") -> ModuleType:
    """Import a user function module from its __init__.py path."""
    module_name = f"{prefix}.{module_path.parent.name}"
    spec = spec_from_file_location(module_name, module_path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not create module spec for {module_path}")

    module = module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def register_module(registry: FunctionRegistry, module: ModuleType) -> int:
    """Register every @stellar_function in a module. Returns how many were added."""
    added = 0
    for value in list(vars(module).values()):
        info = get_function_info(value) if callable(value) else None
        if info is None:
            continue
        try:
            registry.add(info)
            added += 1
        except FunctionRegistrationError as e:
            logger.warning(str(e))
    return added


def load_all_functions(
    registry: FunctionRegistry,
    user_dir: Path | None = None,
    include_builtins: bool = True,
) -> int:
    """
    Load built-in and user functions into the registry.

    A module that fails to import is logged and skipped.

    Returns:
        Number of functions registered.
    """
    total = 0

    if include_builtins:
        for module_name in discover_builtin_modules():
            try:
                module = importlib.import_module(module_name)
            except Exception as e:
                logger.warning(f"Failed to load functions from '{module_name}': {e}")
                continue
            total += register_module(registry, module)

    for module_path in discover_user_modules(user_dir):
        try:
            module = load_user_module(module_path)
        except Exception as e:
            logger.warning(f"Failed to load functions from '{module_path.parent.name}': {e}")
            continue
        total += register_module(registry, module)

    logger.info(f"Loaded {total} functions")
    return total


def load_functions_async(
    registry: FunctionRegistry,
    user_dir: Path | None = None,
    include_builtins: bool = True,
) -> threading.Thread:
    """Load functions in a daemon thread; the registry is marked loaded when done."""
    def _load():
        try:
            load_all_functions(registry, user_dir=user_dir, include_builtins=include_builtins)
        except Exception as e:
            logger.error(f"Function loading failed: {e}")
        finally:
            registry.mark_loaded()

    thread = threading.Thread(target=_load, name="stellar-function-loader", daemon=True)
    thread.start()
    return thread
