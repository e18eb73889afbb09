from pathlib import Path

import pytest
from helpers import mark_by_dir


TESTS = Path(__file__).parent


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    # Keep every test away from the user's cache dir and real env settings
    monkeypatch.setenv("INTENT_CLASSIFIER_DIRECTORIES__HOME", str(tmp_path / "home"))
    for key in ("INTENT_CLASSIFIER_LOGGING__FILE_OUTPUT", "INTENT_CLASSIFIER_LOGGING__CONSOLE_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
    yield


def pytest_collection_modifyitems(config, items):
    # Mark tests by directory structure
    mark_by_dir(items, TESTS / "intent_classifier" / "core", pytest.mark.unit)
    mark_by_dir(items, TESTS / "intent_classifier" / "infra", pytest.mark.integration)
    mark_by_dir(items, TESTS / "intent_classifier" / "app", pytest.mark.e2e)
