import dataclasses
import json

import pytest

from testsuites.ui_testing.framework.exceptions import ConfigurationError
from testsuites.ui_testing.framework.settings import HubType, load_env_data, load_settings


@pytest.fixture
def data_path(tmp_path):
    path = tmp_path / "test_data.json"
    path.write_text(
        json.dumps({
            "GURU": {"base_url": "https://demo.guru99.com/", "title": "Guru99"},
            "APPLITOOLS": {"base_url": "https://demo.applitools.com/"},
        }),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def no_env_file(tmp_path):
    return tmp_path / "missing.env"


def test_defaults(data_path, no_env_file):
    settings = load_settings(env_file=no_env_file, data_path=data_path, environ={})

    assert settings.test_env == "GURU"
    assert settings.base_url == "https://demo.guru99.com/"
    assert settings.browser_type == "chrome"
    assert settings.headless is False
    assert settings.screen_resolution == "1920,1080"
    assert settings.window_size == (1920, 1080)
    assert settings.hub_type is HubType.NONE
    assert settings.is_remote is False
    assert settings.grid_hub_url == "http://localhost:4444"
    assert settings.env_config["title"] == "Guru99"


def test_precedence_override_then_environ_then_dotenv(tmp_path, data_path):
    env_file = tmp_path / ".env"
    env_file.write_text("BROWSER=edge\nTEST_ENV=APPLITOOLS\nHEADLESS=true\n", encoding="utf-8")

    settings = load_settings(env_file=env_file, data_path=data_path, environ={})
    assert settings.browser_type == "edge"
    assert settings.test_env == "APPLITOOLS"
    assert settings.headless is True

    settings = load_settings(env_file=env_file, data_path=data_path, environ={"BROWSER": "firefox"})
    assert settings.browser_type == "firefox"

    settings = load_settings(
        overrides={"browser": "chrome", "env": None},
        env_file=env_file,
        data_path=data_path,
        environ={"BROWSER": "firefox"},
    )
    assert settings.browser_type == "chrome"
    assert settings.test_env == "APPLITOOLS"


def test_environment_lookup(data_path, no_env_file):
    settings = load_settings(
        overrides={"env": "APPLITOOLS"}, env_file=no_env_file, data_path=data_path, environ={}
    )
    assert settings.base_url == "https://demo.applitools.com/"

    with pytest.raises(TypeError):
        settings.env_config["base_url"] = "changed"


def test_unknown_environment_lists_available(data_path, no_env_file):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(overrides={"env": "STAGING"}, env_file=no_env_file, data_path=data_path, environ={})

    assert "STAGING" in str(exc_info.value)
    assert "APPLITOOLS, GURU" in str(exc_info.value)


def test_environment_without_base_url(tmp_path, no_env_file):
    path = tmp_path / "test_data.json"
    path.write_text(json.dumps({"GURU": {"title": "Guru99"}}), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="no base_url"):
        load_settings(env_file=no_env_file, data_path=path, environ={})


def test_env_data_file_errors(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_env_data(tmp_path / "nope.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_env_data(broken)

    listing = tmp_path / "list.json"
    listing.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="JSON object"):
        load_env_data(listing)


@pytest.mark.parametrize("raw, expected", [
    ("true", True),
    ("TRUE", True),
    ("1", True),
    ("yes", True),
    ("false", False),
    ("0", False),
    ("", False),
])
def test_headless_parsing(raw, expected, data_path, no_env_file):
    settings = load_settings(env_file=no_env_file, data_path=data_path, environ={"HEADLESS": raw})
    assert settings.headless is expected


def test_headless_override_accepts_bool(data_path, no_env_file):
    settings = load_settings(
        overrides={"headless": True}, env_file=no_env_file, data_path=data_path, environ={}
    )
    assert settings.headless is True


def test_grid_hub(data_path, no_env_file):
    settings = load_settings(
        overrides={"hubType": "grid", "hubUrl": "http://grid:4444/wd/hub"},
        env_file=no_env_file,
        data_path=data_path,
        environ={},
    )
    assert settings.hub_type is HubType.GRID
    assert settings.is_remote is True
    assert settings.grid_hub_url == "http://grid:4444/wd/hub"


def test_unknown_hub_type(data_path, no_env_file):
    with pytest.raises(ConfigurationError, match="Unknown hub type 'CLOUD'"):
        load_settings(overrides={"hubType": "cloud"}, env_file=no_env_file, data_path=data_path, environ={})


def test_invalid_resolution(data_path, no_env_file):
    settings = load_settings(
        overrides={"resolution": "wide"}, env_file=no_env_file, data_path=data_path, environ={}
    )
    with pytest.raises(ConfigurationError, match="width,height"):
        settings.window_size


def test_download_dir_expands_user(data_path, no_env_file, tmp_path):
    settings = load_settings(
        overrides={"downloadDir": str(tmp_path / "dl")},
        env_file=no_env_file,
        data_path=data_path,
        environ={},
    )
    assert settings.download_dir == tmp_path / "dl"


def test_settings_are_immutable(data_path, no_env_file):
    settings = load_settings(env_file=no_env_file, data_path=data_path, environ={})

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.browser_type = "firefox"


def test_bundled_environment_data():
    data = load_env_data()
    assert {"GURU", "APPLITOOLS", "AUTOMATION_TESTING"} <= set(data)
    assert all("base_url" in record for record in data.values())
