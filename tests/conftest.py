# tests/conftest.py
import pytest


@pytest.fixture
def sample_repo(tmp_path):
    """
    a.txt             -> "hello"
    img.png           -> binary by extension
    node_modules/x.js -> ignored directory
    """
    (tmp_path / "a.txt").write_text("hello", encoding="utf-8")
    (tmp_path / "img.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "x.js").write_text("module.exports = 1;", encoding="utf-8")
    return tmp_path
