"""Route module discovery.

Walks a routes directory and imports every ``.py`` file in it, recursing
into subdirectories. Each module contributes the mapping found in its
``routes`` attribute (the attribute name is configurable). Files and
directories starting with ``_`` or ``.`` are skipped, so shared helpers
can live in ``_helpers.py`` next to the routes that use them.

Files are visited in sorted path order, which makes collision overrides
deterministic: a later file wins over an earlier one.
"""

import importlib.util
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from roost.errors import ConfigurationError

logger = logging.getLogger("roost.routing")


def discover_route_files(routes_dir: str | Path) -> list[Path]:
    """Return the route module paths under *routes_dir*, in load order."""
    root = Path(routes_dir).resolve()
    if not root.is_dir():
        raise FileNotFoundError(f"Routes directory not found: {root}")

    files: list[Path] = []
    _walk(root, files)
    return files


def _walk(directory: Path, files: list[Path]) -> None:
    for item in sorted(directory.iterdir()):
        if item.name.startswith(("_", ".")):
            continue
        if item.is_dir():
            _walk(item, files)
        elif item.is_file() and item.suffix == ".py":
            files.append(item)


def load_route_modules(
    routes_dir: str | Path,
    *,
    attribute: str = "routes",
) -> list[Mapping[str, Any]]:
    """Import every route module under *routes_dir* and collect its mapping.

    Modules without the attribute contribute nothing. Import errors
    propagate unchanged.

    Raises:
        FileNotFoundError: If *routes_dir* is not a directory.
        ConfigurationError: If a module's attribute is not a mapping.
    """
    root = Path(routes_dir).resolve()
    mappings: list[Mapping[str, Any]] = []
    for file in discover_route_files(root):
        module = _import_file(file, root)
        routes = getattr(module, attribute, None)
        if routes is None:
            logger.debug("Route module %s has no %r attribute, skipped", file, attribute)
            continue
        if not isinstance(routes, Mapping):
            msg = f"{file}: {attribute!r} must be a mapping, got {type(routes).__name__}."
            raise ConfigurationError(msg)
        logger.debug("Loaded %d route(s) from %s", len(routes), file)
        mappings.append(routes)
    return mappings


def _import_file(file: Path, root: Path) -> Any:
    """Import a single route file under a name derived from its path."""
    relative = file.relative_to(root).with_suffix("")
    module_name = "_roost_routes." + ".".join(relative.parts)

    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        msg = f"Cannot import route module {file}."
        raise ConfigurationError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise
    return module
