# tests/conftest.py
import pytest
import yaml

from line_normalizer.core.runtime import SETTINGS_ENV_VAR


@pytest.fixture
def plain_line():
    return (
        "4/1/11 11:00:00 AM,123 4th St,94121,Monkey Alberto,"
        "1:23:32.123,1:32:33.123,zzsasdfa,I am the very model of a modern major general"
    )


@pytest.fixture
def quoted_address_line():
    return (
        '4/1/11 11:00:00 AM,"123 4th St, Anywhere, AA",94121,Monkey Alberto,'
        "1:23:32.123,1:32:33.123,zzsasdfa,I am the very model of a modern major general"
    )


@pytest.fixture
def quoted_notes_line():
    return (
        "3/12/14 12:00:00 AM,Somewhere Else,1,Superman übertan,"
        '1:23:32.123,1:32:33.123,zzsasdfa,"This is some, notes"'
    )


# --- Run the CLI inside tmp_path with its own settings file ---
@pytest.fixture
def workspace(tmp_path, monkeypatch):
    logfile = tmp_path / "run.log"
    settings = {
        "output_prefix": "normalized-",
        "skip_first_line": True,
        "logfile": str(logfile),
    }
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(yaml.safe_dump(settings), encoding="utf-8")

    monkeypatch.setenv(SETTINGS_ENV_VAR, str(settings_file))
    monkeypatch.chdir(tmp_path)
    return tmp_path
