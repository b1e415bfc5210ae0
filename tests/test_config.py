"""Tests for configuration loading."""

import logging

import pytest

from tasked.config import DATA_DIR, Config, load_config


@pytest.fixture
def conf(tmp_path):
    path = tmp_path / "tasked.conf"

    def _write(text: str):
        path.write_text(text)
        return path

    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.default_sort == "priority"
        assert config.move_stamps_completion is False
        assert config.due_soon_days == 3

    def test_parses_keys(self, conf, tmp_path):
        path = conf(
            "# Tasked settings\n"
            f'TASKS_FILE="{tmp_path}/tasks.json" # where tasks live\n'
            "DEFAULT_SORT=dueDate\n"
            "DEFAULT_FILTER = high\n"
            "MOVE_STAMPS_COMPLETION=yes  # stamp on move\n"
            "DUE_SOON_DAYS='5'\n"
        )
        config = load_config(path)
        assert config.tasks_path == tmp_path / "tasks.json"
        assert config.default_sort == "dueDate"
        assert config.default_filter == "high"
        assert config.move_stamps_completion is True
        assert config.due_soon_days == 5

    def test_invalid_values_keep_defaults(self, conf, caplog):
        path = conf(
            "DEFAULT_SORT=alphabetical\n"
            "DEFAULT_FILTER=someday\n"
            "MOVE_STAMPS_COMPLETION=maybe\n"
            "DUE_SOON_DAYS=soon\n"
            "not a setting\n"
        )
        with caplog.at_level(logging.WARNING):
            config = load_config(path)
        assert config == Config()
        assert "DUE_SOON_DAYS" in caplog.text

    def test_default_tasks_path(self):
        assert Config().tasks_path == DATA_DIR / "tasks.json"

    def test_tasks_path_expands_user(self):
        config = Config(tasks_file="~/boards/tasks.json")
        assert "~" not in str(config.tasks_path)
