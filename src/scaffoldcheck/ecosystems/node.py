"""Node.js ecosystem: node_modules resolution and require() of model files."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from scaffoldcheck.ecosystems.base import BaseEcosystem

if TYPE_CHECKING:
    import logging

# Used only when node itself cannot report require('module').builtinModules
NODE_BUILTINS = frozenset(
    {
        "assert",
        "assert/strict",
        "async_hooks",
        "buffer",
        "child_process",
        "cluster",
        "console",
        "constants",
        "crypto",
        "dgram",
        "diagnostics_channel",
        "dns",
        "dns/promises",
        "domain",
        "events",
        "fs",
        "fs/promises",
        "http",
        "http2",
        "https",
        "inspector",
        "inspector/promises",
        "module",
        "net",
        "os",
        "path",
        "path/posix",
        "path/win32",
        "perf_hooks",
        "process",
        "punycode",
        "querystring",
        "readline",
        "readline/promises",
        "repl",
        "stream",
        "stream/consumers",
        "stream/promises",
        "stream/web",
        "string_decoder",
        "sys",
        "timers",
        "timers/promises",
        "tls",
        "trace_events",
        "tty",
        "url",
        "util",
        "util/types",
        "v8",
        "vm",
        "wasi",
        "worker_threads",
        "zlib",
    }
)

_BUILTINS_SCRIPT = "process.stdout.write(JSON.stringify(require('module').builtinModules))"
_FILE_SUFFIXES = ("", ".js", ".json", ".cjs")
_INDEX_FILES = ("index.js", "index.json", "index.cjs")

# Exit 0 when the export is defined, 2 when undefined, 1 with the message on throw.
_REQUIRE_SCRIPT = """\
try {
  const exported = require(process.argv[1]);
  process.exit(exported === undefined ? 2 : 0);
} catch (e) {
  process.stderr.write(String((e && e.message) || e));
  process.exit(1);
}
"""


class NodeEcosystem(BaseEcosystem):
    def __init__(self, load_timeout: int = 30) -> None:
        super().__init__(load_timeout=load_timeout)
        self._builtins: frozenset[str] | None = None

    def name(self) -> str:
        return "node"

    def builtin_modules(self, logger: logging.Logger) -> frozenset[str]:
        """Built-in module names as reported by the installed node, cached."""
        if self._builtins is None:
            self._builtins = self._query_builtins(logger)
        return self._builtins

    def _query_builtins(self, logger: logging.Logger) -> frozenset[str]:
        try:
            result = subprocess.run(
                ["node", "-e", _BUILTINS_SCRIPT],
                timeout=self.load_timeout,
                capture_output=True,
                text=True,
                check=False,
            )
            names = json.loads(result.stdout) if result.returncode == 0 else None
        except (OSError, subprocess.TimeoutExpired, ValueError) as e:
            logger.debug(f"Could not query node built-ins: {e}")
            names = None

        if not isinstance(names, list) or not names:
            logger.debug("Using bundled list of Node built-ins")
            return NODE_BUILTINS
        return frozenset(str(n) for n in names)

    def resolve(self, dependency: str, project_root: Path, logger: logging.Logger) -> str:
        if dependency.startswith("node:") or dependency in self.builtin_modules(logger):
            logger.debug(f"{dependency} is a Node built-in")
            return f"node:{dependency.removeprefix('node:')}"

        root = project_root.resolve()
        for directory in (root, *root.parents):
            base = directory / "node_modules" / dependency
            found = self._resolve_entry(dependency, base)
            if found is not None:
                logger.debug(f"{dependency} resolved to {found}")
                return str(found)

        raise ModuleNotFoundError(f"Cannot find module '{dependency}'")

    def _resolve_entry(self, dependency: str, base: Path) -> Path | None:
        found = _first_file(base, _FILE_SUFFIXES)
        if found is not None:
            return found
        if not base.is_dir():
            return None

        manifest = base / "package.json"
        if manifest.is_file():
            try:
                pkg = json.loads(manifest.read_text(encoding="utf-8"))
            except (OSError, ValueError) as e:
                raise ImportError(f"Invalid package.json for '{dependency}': {e}") from e
            if not isinstance(pkg, dict):
                raise ImportError(f"Invalid package.json for '{dependency}'")
            if pkg.get("exports") is not None:
                return manifest
            main = pkg.get("main")
            if isinstance(main, str) and main:
                target = base / main
                found = _first_file(target, _FILE_SUFFIXES)
                if found is None and target.is_dir():
                    found = _first_file(target, ("",), names=_INDEX_FILES)
                if found is not None:
                    return found

        return _first_file(base, ("",), names=_INDEX_FILES)

    def load(self, path: Path, project_root: Path, logger: logging.Logger) -> bool:
        logger.info(f"Requiring {path} with node")
        try:
            result = subprocess.run(
                ["node", "-e", _REQUIRE_SCRIPT, str(path.resolve())],
                cwd=project_root,
                timeout=self.load_timeout,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise RuntimeError("node executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise TimeoutError(f"require timed out after {self.load_timeout}s") from e

        logger.info(f"node exited with code {result.returncode}")
        if result.stderr:
            logger.debug(f"stderr: {result.stderr}")

        if result.returncode == 1:
            message = result.stderr.strip().splitlines()
            raise RuntimeError(message[0] if message else "require failed")
        if result.returncode not in (0, 2):
            raise RuntimeError(f"node exited with code {result.returncode}")
        return result.returncode == 0


def _first_file(
    base: Path, suffixes: tuple[str, ...], names: tuple[str, ...] = ("",)
) -> Path | None:
    for name in names:
        target = base / name if name else base
        for suffix in suffixes:
            candidate = target.with_name(target.name + suffix) if suffix else target
            if candidate.is_file():
                return candidate
    return None
