import importlib
import json
import sys

import pytest

from chem_inventory import config as config_module
from chem_inventory import main as main_module
from chem_inventory import settings
from chem_inventory.core.config_model import FeatureFlags, InventoryConfig


@pytest.fixture(autouse=True)
def _no_log_handlers(monkeypatch):
    monkeypatch.setattr(main_module, "configure_logging", lambda **kwargs: None)


def _use(monkeypatch, config):
    monkeypatch.setattr(settings, "CONFIG", config)


def test_summary(monkeypatch, capsys):
    _use(monkeypatch, InventoryConfig(form_id="1a2b3c", spreadsheet_id="xyz789"))

    assert main_module.main([]) == 0

    out = capsys.readouterr().out
    assert "Form ID: 1a2b3c" in out
    assert "Spreadsheet ID: xyz789" in out
    assert "Features: auto_sync, advanced_logging" in out
    assert "Notifications: disabled" in out


def test_summary_without_features(monkeypatch, capsys):
    _use(
        monkeypatch,
        InventoryConfig(features=FeatureFlags(auto_sync=False, advanced_logging=False)),
    )

    assert main_module.main([]) == 0
    assert "Features: none" in capsys.readouterr().out


def test_json_output(monkeypatch, capsys):
    config = InventoryConfig(form_id="1a2b3c", spreadsheet_id="xyz789")
    _use(monkeypatch, config)

    assert main_module.main(["--json"]) == 0
    assert json.loads(capsys.readouterr().out) == config.to_dict()


def test_validate_fails_on_placeholder(monkeypatch, capsys):
    _use(monkeypatch, InventoryConfig(spreadsheet_id="abc123"))

    assert main_module.main(["--validate"]) == 1

    captured = capsys.readouterr()
    assert "Configuration error: FORM_ID must be set with actual value" in captured.err
    assert "ready" not in captured.out


def test_validate_succeeds(monkeypatch, capsys):
    _use(monkeypatch, InventoryConfig(form_id="1a2b3c", spreadsheet_id="xyz789"))

    assert main_module.main(["--validate"]) == 0
    assert "✓ Configuration is ready" in capsys.readouterr().out


def test_json_output_stays_parseable_when_validating(monkeypatch, capsys):
    config = InventoryConfig(form_id="1a2b3c", spreadsheet_id="xyz789")
    _use(monkeypatch, config)

    assert main_module.main(["--json", "--validate"]) == 0
    assert json.loads(capsys.readouterr().out) == config.to_dict()


def test_bad_environment_override_is_fatal(monkeypatch, capsys):
    monkeypatch.setenv("CHEM_INVENTORY_ENVIRONMENT", "staging")
    importlib.reload(config_module)
    # Force settings to rebuild its record from the reloaded environment
    monkeypatch.delitem(sys.modules, "chem_inventory.settings")
    try:
        assert main_module.main([]) == 1

        captured = capsys.readouterr()
        assert "CHEM_INVENTORY_ENVIRONMENT" in captured.err
        assert "staging" in captured.err
        assert captured.out == ""
    finally:
        monkeypatch.undo()
        importlib.reload(config_module)
