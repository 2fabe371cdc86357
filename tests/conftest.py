import logging
import sys
from pathlib import Path

import pytest

# Ensure the src directory (and the repo root, for test fixtures) are importable
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / 'src'))
sys.path.insert(0, str(root))


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp dir and undo CLI logging setup."""
    config = tmp_path / "formgen-config.json"
    monkeypatch.setenv("FORMGEN_CONFIG", str(config))
    monkeypatch.delenv("FORMGEN_CONFIG_DIR", raising=False)
    monkeypatch.delenv("FORMGEN_LOG_DIR", raising=False)
    yield config
    logger = logging.getLogger("formgen")
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
