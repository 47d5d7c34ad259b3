"""Plugin loader for discovering and importing plughost plugins.

Plugin modules register themselves as an import side effect, so loading a
plugin means importing its module. Scans directories for Python files, or
imports installed modules by name.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any

from plughost.errors import PluginLoadError
from plughost.plugins.registry import default_registry

logger = logging.getLogger(__name__)


class PluginLoader:
    """Discover and load plugins from directories."""

    @classmethod
    def load_all(
        cls,
        plugin_dirs: list[str] | None = None,
    ) -> dict[str, Any]:
        """Load all plugins from specified directories.

        Args:
            plugin_dirs: List of directory paths to scan. If None, uses the
                        'plugins/' directory relative to the working directory.

        Returns:
            Dict with number of files executed, plugins registered, and errors
        """
        if plugin_dirs is None:
            plugin_dirs = ["plugins"]

        stats: dict[str, Any] = {"files": 0, "registered": 0, "errors": []}

        for dir_path in plugin_dirs:
            path = Path(dir_path)
            if not path.exists():
                logger.warning(f"Plugin directory not found: {dir_path}")
                continue

            if not path.is_dir():
                logger.warning(f"Plugin path is not a directory: {dir_path}")
                continue

            loaded = cls.load_from_directory(str(path))
            stats["files"] += loaded["files"]
            stats["registered"] += loaded["registered"]
            stats["errors"].extend(loaded["errors"])

        logger.info(
            f"Loaded {stats['files']} plugin files, "
            f"{stats['registered']} plugins registered, "
            f"{len(stats['errors'])} errors"
        )

        return stats

    @classmethod
    def load_from_directory(cls, directory: str) -> dict[str, Any]:
        """Load all Python files from a directory.

        Files named __init__.py or starting with '_' are skipped. A file that
        fails to import is recorded in the returned errors; the rest still load.
        Plugins register into the process-wide registry, so that is where
        growth is counted.
        """
        registry = default_registry()
        dir_path = Path(directory)
        stats: dict[str, Any] = {"files": 0, "registered": 0, "errors": []}

        py_files = sorted(
            f
            for f in dir_path.glob("*.py")
            if f.name != "__init__.py" and not f.name.startswith("_")
        )

        logger.debug(f"Found {len(py_files)} plugin files in {directory}")

        for py_file in py_files:
            before = len(registry)
            try:
                cls.load_plugin_file(str(py_file))
            except Exception as e:
                error_msg = f"Failed to load {py_file.name}: {e}"
                logger.error(error_msg)
                stats["errors"].append(error_msg)
                continue

            stats["files"] += 1
            stats["registered"] += len(registry) - before
            logger.debug(f"Loaded plugin: {py_file.name}")

        return stats

    @classmethod
    def load_plugin_file(cls, file_path: str) -> None:
        """Load a single plugin file.

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If the path is not a .py file
            ImportError: If no module spec can be built for the file
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Plugin file not found: {file_path}")

        if not path.is_file() or path.suffix != ".py":
            raise ValueError(f"Not a Python file: {file_path}")

        module_name = f"plughost_plugin_{path.stem}"

        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load spec for {file_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            del sys.modules[module_name]
            raise

        logger.debug(f"Executed plugin module: {module_name}")

    @classmethod
    def load_plugin(cls, module_name: str) -> None:
        """Load a plugin by module name (for installed packages).

        Raises:
            PluginLoadError: If module cannot be imported
        """
        try:
            importlib.import_module(module_name)
            logger.debug(f"Loaded plugin module: {module_name}")
        except ImportError as e:
            raise PluginLoadError(f"Failed to import plugin {module_name}: {e}") from e
