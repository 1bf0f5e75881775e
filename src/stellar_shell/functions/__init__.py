"""
Built-in Stellar function library.

Functions are declared with @stellar_function and registered by the loader,
normally from a background thread.
"""

from stellar_shell.functions.loader import (
    PACKAGE_FUNCTIONS_DIR,
    USER_FUNCTIONS_DIR,
    load_all_functions,
    load_functions_async,
)

__all__ = [
    "load_all_functions",
    "load_functions_async",
    "USER_FUNCTIONS_DIR",
    "PACKAGE_FUNCTIONS_DIR",
]
