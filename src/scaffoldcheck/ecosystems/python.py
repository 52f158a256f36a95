"""Python ecosystem: importlib resolution and import of model files."""

from __future__ import annotations

import importlib.util
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

from scaffoldcheck.ecosystems.base import BaseEcosystem

if TYPE_CHECKING:
    import logging


@contextmanager
def _prepended_path(*entries: Path) -> Iterator[None]:
    saved = list(sys.path)
    sys.path[:0] = [str(e) for e in entries]
    try:
        yield
    finally:
        sys.path[:] = saved


class PythonEcosystem(BaseEcosystem):
    def name(self) -> str:
        return "python"

    def resolve(self, dependency: str, project_root: Path, logger: logging.Logger) -> str:
        with _prepended_path(project_root.resolve()):
            spec = importlib.util.find_spec(dependency)
        if spec is None:
            raise ModuleNotFoundError(f"No module named '{dependency}'")
        origin = spec.origin or "namespace package"
        logger.debug(f"{dependency} resolved to {origin}")
        return origin

    def load(self, path: Path, project_root: Path, logger: logging.Logger) -> bool:
        logger.info(f"Importing {path}")
        module_name = f"_scaffoldcheck_model_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"cannot load {path.name}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            with _prepended_path(project_root.resolve(), path.parent.resolve()):
                spec.loader.exec_module(module)
        except SystemExit as e:
            raise RuntimeError(f"model called sys.exit({e.code})") from e
        finally:
            sys.modules.pop(module_name, None)

        public = [n for n in vars(module) if not n.startswith("_")]
        logger.debug(f"{path.name} defines {len(public)} public name(s)")
        return bool(public)

    def is_model_file(self, filename: str, extension: str) -> bool:
        # Package markers such as __init__.py are not models
        return filename.endswith(extension) and not filename.startswith("__")
