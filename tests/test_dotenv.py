"""Tests for the Dotenv loader object."""

from __future__ import annotations

import pytest

from envload import Dotenv
from envload.errors import InvalidPathError, MissingVariableError, ParseError


@pytest.fixture()
def env_dir(tmp_path):
    (tmp_path / ".env").write_text("TEST_VAR=test_value\nFOO=new\nDEBUG=true\nUNSET_ME=\n")
    (tmp_path / ".env.local").write_text("LOCAL=1\n")
    return tmp_path


def test_load_env_file(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, env=fake_env)
    variables = dotenv.load()
    assert variables["TEST_VAR"] == "test_value"
    assert fake_env["TEST_VAR"] == "test_value"
    assert fake_env["DEBUG"] == "true"


def test_load_custom_file_name(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, ".env.local", env=fake_env)
    assert dotenv.file_path == env_dir / ".env.local"
    assert dotenv.load() == {"LOCAL": "1"}


def test_load_missing_file(tmp_path, fake_env):
    dotenv = Dotenv.create_immutable(tmp_path, ".env.nonexistent", env=fake_env)
    with pytest.raises(InvalidPathError):
        dotenv.load()


def test_safe_load_missing_file(tmp_path, fake_env):
    dotenv = Dotenv.create_immutable(tmp_path, env=fake_env)
    assert dotenv.safe_load() == {}
    assert dotenv.variables == {}


def test_immutable_mode(env_dir, fake_env):
    fake_env["FOO"] = "old"
    Dotenv.create_immutable(env_dir, env=fake_env).load()
    assert fake_env["FOO"] == "old"


def test_mutable_mode(env_dir, fake_env):
    fake_env["FOO"] = "old"
    fake_env["UNSET_ME"] = "present"
    dotenv = Dotenv.create_mutable(env_dir, env=fake_env)
    assert not dotenv.immutable
    dotenv.load()
    assert fake_env["FOO"] == "new"
    assert "UNSET_ME" not in fake_env


def test_load_expands_against_env_store(tmp_path, fake_env):
    (tmp_path / ".env").write_text("LOG_DIR=$HOME/logs\n")
    assert Dotenv.create_immutable(tmp_path, env=fake_env).load() == {"LOG_DIR": "/home/tester/logs"}


def test_parse_error_leaves_env_untouched(tmp_path, fake_env):
    (tmp_path / ".env").write_text('FIRST=1\nBROKEN="open\n')
    before = dict(fake_env)
    dotenv = Dotenv.create_mutable(tmp_path, env=fake_env)
    with pytest.raises(ParseError):
        dotenv.load()
    assert fake_env == before
    assert dotenv.variables == {}


def test_variables_is_a_copy(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, env=fake_env)
    dotenv.load()
    dotenv.variables["TEST_VAR"] = "changed"
    assert dotenv.variables["TEST_VAR"] == "test_value"


def test_required_variables(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, env=fake_env)
    dotenv.load()
    dotenv.required(["TEST_VAR", "DEBUG"]).not_empty()
    dotenv.required("TEST_VAR").validate()


def test_required_variables_missing(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, env=fake_env)
    dotenv.load()
    with pytest.raises(MissingVariableError):
        dotenv.required(["MISSING_VAR"]).validate()


def test_required_default_to(env_dir, fake_env):
    dotenv = Dotenv.create_immutable(env_dir, env=fake_env)
    dotenv.load()
    dotenv.required(["PORT"]).default_to("8000")
    assert dotenv.variables["PORT"] == "8000"
    assert fake_env["PORT"] == "8000"


def test_get_method(env_dir, fake_env):
    Dotenv.create_immutable(env_dir, env=fake_env).load()
    assert Dotenv.get("TEST_VAR", env=fake_env) == "test_value"
    assert Dotenv.get("NON_EXISTENT", "default", env=fake_env) == "default"


def test_get_reads_os_environ_by_default(monkeypatch):
    monkeypatch.setenv("ENVLOAD_GET_TEST", "from-os")
    assert Dotenv.get("ENVLOAD_GET_TEST") == "from-os"
