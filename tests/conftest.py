import pytest


@pytest.fixture(autouse=True)
def clean_bucket_env(monkeypatch):
    """Start every test without the bucket settings from the caller's shell."""
    monkeypatch.delenv("namePrefix", raising=False)
    monkeypatch.delenv("autoDeleteObjects", raising=False)
