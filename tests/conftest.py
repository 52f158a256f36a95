"""Pytest configuration and fixtures."""

import json
import logging
import subprocess
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up scaffoldcheck loggers after each test to prevent handler leaks."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("scaffoldcheck")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def logger():
    logger = logging.getLogger("scaffoldcheck_test")
    logger.setLevel(logging.DEBUG)
    return logger


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def _install_node_package(root: Path, name: str) -> None:
    pkg_dir = root / "node_modules" / name
    _write(pkg_dir / "package.json", json.dumps({"name": name, "main": "index.js"}))
    _write(pkg_dir / "index.js", "module.exports = {};\n")


@pytest.fixture
def node_project(tmp_path):
    """A backend project that satisfies every item of the built-in checklist."""
    root = tmp_path / "backend"
    root.mkdir()

    for name in ("express", "mongoose", "cors", "dotenv"):
        _install_node_package(root, name)

    _write(
        root / "package.json",
        json.dumps(
            {
                "name": "backend",
                "scripts": {"start": "node src/server.js"},
                "dependencies": {"express": "^4.18.2", "mongoose": "^8.0.0"},
            }
        ),
    )
    _write(root / ".env.example", "PORT=5001\nMONGO_URI=mongodb://localhost/app\n")
    _write(root / "src" / "server.js", "require('express')();\n")
    (root / "src" / "controllers").mkdir(parents=True)
    (root / "src" / "middleware").mkdir(parents=True)
    _write(root / "src" / "models" / "User.js", "module.exports = { name: 'User' };\n")
    _write(
        root / "Dockerfile",
        "FROM node:20-alpine\nWORKDIR /app\nCOPY . .\nRUN npm ci\nEXPOSE 5001\nCMD [\"npm\", \"start\"]\n",
    )
    return root


@pytest.fixture
def fake_node(mocker):
    """Replace the node subprocess with one that reports a defined export."""

    def _run(cmd, **kwargs):
        if "builtinModules" in cmd[2]:
            return subprocess.CompletedProcess(cmd, 0, stdout='["fs", "http", "vm"]', stderr="")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    return mocker.patch("scaffoldcheck.ecosystems.node.subprocess.run", side_effect=_run)

