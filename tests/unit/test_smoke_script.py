"""Tests for the smoke test script."""

import importlib.util
from pathlib import Path
from unittest.mock import patch

import pytest

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "smoke_test.py"


@pytest.fixture
def smoke_test():
    spec = importlib.util.spec_from_file_location("smoke_test", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSmokeScript:
    """Test scripts/smoke_test.py checks."""

    def test_every_check_holds(self, smoke_test):
        trade = smoke_test.build_trade()
        checks = (smoke_test.address_checks(trade) + smoke_test.duration_checks(trade)
                  + smoke_test.role_checks())

        results = [(name, check(), expected) for name, check, expected in checks]

        assert [name for name, actual, expected in results if actual != expected] == []

    def test_main_exits_cleanly(self, smoke_test, capsys):
        with patch.object(smoke_test, "configure_logging"):
            smoke_test.main()

        assert "All checks passed" in capsys.readouterr().out
