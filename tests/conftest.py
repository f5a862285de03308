import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from samplekit.config import set_config  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Every test starts from the embedded defaults."""
    monkeypatch.delenv("SAMPLEKIT_CONFIG", raising=False)
    set_config(None)
    yield
    set_config(None)
