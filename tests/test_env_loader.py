"""Tests for loading environments"""

from pathlib import Path
from typing import Any, List, Tuple

import pytest

from conftest import write_env_files
from vidar import Config, EnvLoader, Environment, Kind, load, merge
from vidar.exceptions import EnvFileIOError, InvalidPropertyError, VidarError
from vidar.logger import Logger


class RecordingLogger(Logger):
    """Logger collecting records in memory"""

    def __init__(self):
        self.records: List[Tuple[str, str, dict]] = []

    def debug(self, message: str, **kwargs: Any) -> None:
        self.records.append(("DEBUG", message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self.records.append(("INFO", message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self.records.append(("WARNING", message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self.records.append(("ERROR", message, kwargs))

    def get_session_id(self) -> str:
        return "recording"


def check_common_props(env: Environment) -> None:
    assert env.props["key1"] == "val1"
    assert env.props["key2"] == "val2"
    assert env.props["key3"] == "val3"


class TestMerge:
    """Tests for merge()"""

    def test_later_sources_win(self):
        assert merge({"a": "1", "b": "1"}, {"b": "2", "c": "2"}, {"c": "3"}) == {
            "a": "1",
            "b": "2",
            "c": "3",
        }

    def test_no_sources(self):
        assert merge() == {}

    def test_inputs_untouched(self):
        first = {"a": "1"}
        merge(first, {"a": "2"})
        assert first == {"a": "1"}


class TestLoad:
    """Tests for load() over the standard fixture files"""

    def test_dev_with_common(self, env_dir: Path):
        env = load(Config(base_dir=env_dir, load_common=True))

        assert env.current is Kind.DEVELOPMENT
        check_common_props(env)
        assert env.props["url"] == "https://localhost"
        assert len(env.props) == 4

    def test_test_with_comments(self, env_dir: Path):
        config = Config(
            base_dir=env_dir,
            kind=Kind.TEST,
            load_common=True,
            has_comments=True,
            comment_char="#",
        )
        env = load(config)

        check_common_props(env)
        assert env.props["url"] == "https://testurl.vidar.com"
        assert not any(key.startswith("#") for key in env.props)

    def test_prod_with_common(self, env_dir: Path):
        env = load(Config(base_dir=env_dir, kind=Kind.PRODUCTION, load_common=True))

        check_common_props(env)
        assert env.props["url"] == "https://produrl.vidar.com"
        assert env.props["creds"] == "secret"

    def test_without_common(self, env_dir: Path):
        env = load(Config(base_dir=env_dir, kind=Kind.PRODUCTION))
        assert dict(env.props) == {"url": "https://produrl.vidar.com", "creds": "secret"}

    def test_empty_kind_file(self, env_dir: Path):
        env = load(Config(base_dir=env_dir, kind=Kind.INTEGRATION))
        assert env.current is Kind.INTEGRATION
        assert len(env.props) == 0

    def test_common_kind(self, env_dir: Path):
        env = load(Config(base_dir=env_dir, kind=Kind.COMMON, load_common=True))
        assert env.current is Kind.COMMON
        assert dict(env.props) == {"key1": "val1", "key2": "val2", "key3": "val3"}

    def test_invalid_property(self, env_dir: Path):
        with pytest.raises(InvalidPropertyError) as exc_info:
            load(Config(base_dir=env_dir, kind=Kind.STAGING))
        assert exc_info.value.path == env_dir / "stage.env"

    def test_invalid_property_in_common_fails_load(self, make_env_dir):
        directory = make_env_dir({Kind.COMMON: "no separator", Kind.DEVELOPMENT: "url=x"})
        with pytest.raises(InvalidPropertyError):
            load(Config(base_dir=directory, load_common=True))

    def test_missing_kind_file(self, make_env_dir):
        """Integration file absent while every other file exists"""
        directory = make_env_dir({
            Kind.COMMON: "key1=val1",
            Kind.DEVELOPMENT: "url=https://localhost",
            Kind.TEST: "url=https://testurl.vidar.com",
            Kind.STAGING: "url=https://stage",
            Kind.PRODUCTION: "url=https://prod",
        })
        with pytest.raises(EnvFileIOError) as exc_info:
            load(Config(base_dir=directory, kind=Kind.INTEGRATION, load_common=True))
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.path == directory / "int.env"

    def test_missing_kind_file_without_common(self, tmp_path: Path):
        with pytest.raises(EnvFileIOError):
            load(Config(base_dir=tmp_path, kind=Kind.PRODUCTION))

    def test_missing_common_file_is_fatal(self, make_env_dir):
        directory = make_env_dir({Kind.DEVELOPMENT: "url=https://localhost"})
        with pytest.raises(EnvFileIOError) as exc_info:
            load(Config(base_dir=directory, load_common=True))
        assert exc_info.value.path == directory / "common.env"

    def test_missing_common_ignored_when_not_requested(self, make_env_dir):
        directory = make_env_dir({Kind.DEVELOPMENT: "url=https://localhost"})
        env = load(Config(base_dir=directory))
        assert dict(env.props) == {"url": "https://localhost"}

    def test_kind_file_overrides_common(self, make_env_dir):
        directory = make_env_dir({
            Kind.COMMON: "url=https://common\nshared=yes",
            Kind.PRODUCTION: "url=https://prod",
        })
        env = load(Config(base_dir=directory, kind=Kind.PRODUCTION, load_common=True))
        assert env.props["url"] == "https://prod"
        assert env.props["shared"] == "yes"

    def test_idempotent(self, env_dir: Path):
        config = Config(base_dir=env_dir, kind=Kind.PRODUCTION, load_common=True)
        first = load(config)
        second = load(config)

        assert first == second
        assert first.current == second.current
        assert first.props == second.props

    def test_custom_suffix(self, tmp_path: Path):
        (tmp_path / "dev.props").write_text("a=1")
        env = load(Config(base_dir=tmp_path, suffix=".props"))
        assert env.props == {"a": "1"}


class TestOsEnvSeed:
    """Tests for seeding from the process environment"""

    def test_files_override_os_env(self, make_env_dir):
        directory = make_env_dir({
            Kind.COMMON: "shared=common",
            Kind.DEVELOPMENT: "url=https://localhost",
        })
        environ = {"url": "from-os", "shared": "from-os", "HOME_ONLY": "os"}
        config = Config(base_dir=directory, load_common=True, seed_from_os_env=True)

        env = load(config, environ=environ)

        assert env.props["url"] == "https://localhost"
        assert env.props["shared"] == "common"
        assert env.props["HOME_ONLY"] == "os"

    def test_reads_process_environment(self, env_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VIDAR_TEST_SEED", "seeded")
        monkeypatch.setenv("url", "from-os")

        env = load(Config(base_dir=env_dir, seed_from_os_env=True))

        assert env.props["VIDAR_TEST_SEED"] == "seeded"
        assert env.props["url"] == "https://localhost"

    def test_not_seeded_by_default(self, env_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("VIDAR_TEST_SEED", "seeded")
        env = load(Config(base_dir=env_dir))
        assert "VIDAR_TEST_SEED" not in env

    def test_seed_does_not_leak_into_os_environ(self, env_dir: Path, monkeypatch: pytest.MonkeyPatch):
        import os

        monkeypatch.delenv("url", raising=False)
        load(Config(base_dir=env_dir, seed_from_os_env=True))
        assert "url" not in os.environ


class TestBaseDirectory:
    """Tests for where the loader looks for files"""

    def test_app_name_under_config_root(self, tmp_path: Path):
        write_env_files(tmp_path / "xdg" / "billing")
        environ = {"XDG_CONFIG_HOME": str(tmp_path / "xdg"), "APPDATA": str(tmp_path / "xdg")}

        env = load(Config(app_name="billing", load_common=True), environ=environ)

        assert env.props["url"] == "https://localhost"

    def test_cwd_when_nothing_configured(self, env_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(env_dir)
        env = load(Config(kind=Kind.PRODUCTION))
        assert env.props["creds"] == "secret"

    def test_base_dir_beats_app_name(self, env_dir: Path, tmp_path: Path):
        environ = {"XDG_CONFIG_HOME": str(tmp_path / "nowhere"), "APPDATA": str(tmp_path / "nowhere")}
        env = load(Config(app_name="billing", base_dir=env_dir), environ=environ)
        assert env.props["url"] == "https://localhost"

    def test_recursive_finds_parent_files(self, tmp_path: Path):
        write_env_files(tmp_path, {Kind.COMMON: "shared=root"})
        leaf = write_env_files(tmp_path / "a" / "b", {Kind.DEVELOPMENT: "url=leaf"})

        env = load(Config(base_dir=leaf, load_common=True, recursive=True))

        assert dict(env.props) == {"shared": "root", "url": "leaf"}

    def test_non_recursive_ignores_parent_files(self, tmp_path: Path):
        write_env_files(tmp_path, {Kind.COMMON: "shared=root"})
        leaf = write_env_files(tmp_path / "a" / "b", {Kind.DEVELOPMENT: "url=leaf"})

        with pytest.raises(EnvFileIOError):
            load(Config(base_dir=leaf, load_common=True))

    def test_file_path(self, env_dir: Path):
        loader = EnvLoader(Config(base_dir=env_dir))
        assert loader.file_path(Kind.STAGING) == env_dir / "stage.env"


class TestLoaderLogging:
    """Tests for logging through an injected logger"""

    def test_debug_records_without_values(self, env_dir: Path):
        logger = RecordingLogger()
        load(Config(base_dir=env_dir, kind=Kind.PRODUCTION, load_common=True), logger=logger)

        levels = [level for level, _, _ in logger.records]
        assert levels == ["DEBUG", "DEBUG", "DEBUG"]
        assert logger.records[0][2]["kind"] == "common"
        assert logger.records[1][2]["kind"] == "prod"
        assert logger.records[-1][2]["count"] == 5
        assert not any("secret" in str(fields) for _, _, fields in logger.records)

    def test_error_record_on_failure(self, env_dir: Path):
        logger = RecordingLogger()
        with pytest.raises(VidarError):
            load(Config(base_dir=env_dir, kind=Kind.STAGING), logger=logger)

        level, _, fields = logger.records[-1]
        assert level == "ERROR"
        assert fields["code"] == "INVALID_PROPERTY"
