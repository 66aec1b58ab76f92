"""Discovery of the running entry application.

The entry application is whatever ``__main__`` is: a script run as
``python app.py``, a package run with ``python -m pkg``, or a console-script
wrapper. Helpers here are shallow and accept an explicit module for tests.
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from types import ModuleType

logger = logging.getLogger(__name__)

FALLBACK_APPLICATION_NAME = "python"  # pragma: no mutate


def _main_module() -> ModuleType | None:
    return sys.modules.get("__main__")


def entry_application_name(main: ModuleType | None = None) -> str:
    """Return the name of the entry application.

    Resolution order:
    1. the top-level package of ``__main__.__spec__`` (``python -m pkg.cli`` -> ``pkg``),
    2. the stem of ``__main__.__file__`` (``python app.py`` -> ``app``),
    3. the stem of ``sys.argv[0]``,
    4. ``"python"`` (interactive interpreter).
    """
    main = main if main is not None else _main_module()
    spec = getattr(main, "__spec__", None)
    if spec is not None and spec.name:
        name = spec.name.split(".", 1)[0]
        if name != "__main__":
            return name
    if main_file := getattr(main, "__file__", None):
        return Path(main_file).stem
    if sys.argv and sys.argv[0] not in {"", "-c", "-m"}:
        return Path(sys.argv[0]).stem
    return FALLBACK_APPLICATION_NAME


def entry_directory(main: ModuleType | None = None) -> Path:
    """Return the directory containing the entry script.

    Falls back to the current working directory for interactive sessions.
    """
    main = main if main is not None else _main_module()
    if main_file := getattr(main, "__file__", None):
        return Path(main_file).resolve().parent
    if sys.argv and sys.argv[0] not in {"", "-c", "-m"}:
        return Path(sys.argv[0]).resolve().parent
    return Path.cwd()


def find_application_module(application_name: str) -> ModuleType | None:
    """Return the module that carries the application's identity, or None.

    Already-imported modules (including ``__main__`` when its derived name
    matches) are used as-is; otherwise an import is attempted. Failure to
    resolve the module is not an error.
    """
    if not application_name:
        return None
    if (module := sys.modules.get(application_name)) is not None:
        return module
    main = _main_module()
    if main is not None and entry_application_name(main) == application_name:
        return main
    try:
        return importlib.import_module(application_name)
    except (ImportError, ValueError, TypeError):
        logger.debug("Application module %r could not be imported", application_name)
        return None
