# -*- coding: utf-8 -*-
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_testing import EnvTestingSettings
from app.shared.config.settings_prod import ProdSettings


def test_dev_overrides_defaults():
    s = DevSettings()
    assert s.is_dev
    assert s.log_level.upper() == "DEBUG"
    assert s.log_format == "plain"
    assert s.milestones_repository == "memory"


def test_test_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "test")
    s = EnvTestingSettings()
    assert s.is_test
    assert s.log_level == "WARNING"
    assert s.database_url == "sqlite:///:memory:"


def test_prod_overrides_defaults(monkeypatch):
    monkeypatch.setenv("PYTHON_ENV", "production")
    s = ProdSettings()
    assert s.is_prod
    assert s.log_level.upper() == "INFO"
    assert s.log_format == "json"
    assert s.milestones_repository == "sql"


def test_env_overrides_repository_backend(monkeypatch):
    monkeypatch.setenv("MILESTONES_REPOSITORY", "sql")
    assert DevSettings().milestones_repository == "sql"
# Fin del archivo backend/tests/shared/config/test_settings_envs.py
