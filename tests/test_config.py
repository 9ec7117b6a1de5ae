import importlib
import subprocess
import sys
from pathlib import Path

import pytest

from srgb_lut import config

ROOT = Path(__file__).resolve().parents[1]


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("yes", True), (" On ", True), ("0", False), ("", False), (None, False)],
)
def test_truthy(raw, expected):
    assert config._truthy(raw) is expected


def test_preload_flag_read_from_env(monkeypatch):
    monkeypatch.setenv("SRGB_LUT_PRELOAD", "true")
    assert importlib.reload(config).PRELOAD is True
    monkeypatch.delenv("SRGB_LUT_PRELOAD")
    assert importlib.reload(config).PRELOAD is False


def test_import_preloads_when_env_set(monkeypatch):
    monkeypatch.setenv("SRGB_LUT_PRELOAD", "1")
    code = (
        "import srgb_lut\n"
        "from srgb_lut import lut\n"
        "print(all(t.built for t in lut.TABLES.values()))\n"
    )
    out = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=ROOT
    )
    assert out.stdout.strip() == "True"


def test_import_is_lazy_by_default(monkeypatch):
    monkeypatch.delenv("SRGB_LUT_PRELOAD", raising=False)
    code = (
        "import srgb_lut\n"
        "from srgb_lut import lut\n"
        "print(any(t.built for t in lut.TABLES.values()))\n"
    )
    out = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, check=True, cwd=ROOT
    )
    assert out.stdout.strip() == "False"
