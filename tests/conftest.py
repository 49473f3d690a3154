import pytest


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Run every test from an empty temporary directory.

    The tool reads ``package.json`` and writes ``CHANGELOG.md`` relative to
    the current directory; this keeps the checkout's own files out of reach
    of tests that fall back to ``Path.cwd()``.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path
