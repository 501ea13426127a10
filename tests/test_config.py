# tests/test_config.py

from __future__ import annotations

import logging

from family_tree_utils.config import PROJECT_ROOT, find_project_root, load_config
from family_tree_utils.logging import enable_debug, get_logger


def test_missing_config_uses_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yml")
    assert cfg.debug is False
    assert cfg.title_codes_path == PROJECT_ROOT / "config" / "TitleCodesList.txt"


def test_config_file_values(tmp_path):
    path = tmp_path / "ftu.yml"
    path.write_text(
        "debug: true\npaths:\n  title_codes: /tmp/codes.txt\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.debug is True
    assert str(cfg.title_codes_path) == "/tmp/codes.txt"
    assert cfg.logging["level"] == "DEBUG"


def test_checkout_root_is_the_directory_holding_config(tmp_path):
    package_dir = tmp_path / "src" / "family_tree_utils"
    package_dir.mkdir(parents=True)
    (tmp_path / "config").mkdir()
    assert find_project_root(package_dir) == tmp_path


def test_installed_package_falls_back_to_working_directory(tmp_path, monkeypatch):
    package_dir = tmp_path / "lib" / "site-packages" / "family_tree_utils"
    package_dir.mkdir(parents=True)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert find_project_root(package_dir) == work.resolve()


def test_module_loggers_share_the_base_logger():
    log = get_logger("family_tree_utils.tests.sample")
    base = get_logger()
    assert log.name == "family_tree_utils.tests.sample"
    assert log.parent is base
    assert not log.handlers
    assert get_logger("plain").name == "family_tree_utils.plain"


def test_enable_debug_lowers_every_handler():
    enable_debug()
    base = get_logger()
    assert base.level == logging.DEBUG
    assert all(h.level == logging.DEBUG for h in base.handlers)
