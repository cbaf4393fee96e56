from pathlib import Path

import pytest
from pydantic import ValidationError

from greenleeks.config.gitconfig import (
    DEFAULT_AUTHOR_EMAIL,
    DEFAULT_AUTHOR_NAME,
    AuthorInfo,
    expand_config_path,
    load_author_info,
)
from greenleeks.errors import ConfigExpandError, ConfigReadError


def test_load_author_info_reads_user_section(gitconfig_file):
    author = load_author_info(gitconfig_file)

    assert author.name == "Ada Lovelace"
    assert author.email == "ada@example.com"


def test_load_author_info_defaults_without_user_section(tmp_path):
    path = tmp_path / "gitconfig"
    path.write_text("[core]\n\tbare = false\n")

    author = load_author_info(path)

    assert author == AuthorInfo(name=DEFAULT_AUTHOR_NAME, email=DEFAULT_AUTHOR_EMAIL)
    assert str(author) == "Your Name <your.email@example.com>"


def test_load_author_info_treats_empty_values_as_absent(tmp_path):
    path = tmp_path / "gitconfig"
    path.write_text("[user]\n\tname =\n\temail = grace@example.com\n")

    author = load_author_info(path)

    assert author.name == DEFAULT_AUTHOR_NAME
    assert author.email == "grace@example.com"


def test_load_author_info_missing_file(tmp_path):
    with pytest.raises(ConfigReadError) as excinfo:
        load_author_info(tmp_path / "does-not-exist")

    assert "does-not-exist" in str(excinfo.value)


def test_load_author_info_malformed_file(tmp_path):
    path = tmp_path / "gitconfig"
    path.write_text("name = no section header\n")

    with pytest.raises(ConfigReadError):
        load_author_info(path)


def test_expand_config_path_uses_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert expand_config_path("~/.gitconfig") == tmp_path / ".gitconfig"


def test_expand_config_path_makes_relative_paths_absolute():
    assert expand_config_path("gitconfig").is_absolute()


def test_expand_config_path_failure_is_typed(monkeypatch):
    def no_home(self):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "expanduser", no_home)

    with pytest.raises(ConfigExpandError) as excinfo:
        expand_config_path("~/.gitconfig")

    assert "home directory" in str(excinfo.value)


def test_author_info_is_immutable():
    author = AuthorInfo(name="Ada", email="ada@example.com")

    with pytest.raises(ValidationError):
        author.name = "Grace"

    actor = author.as_actor()
    assert (actor.name, actor.email) == ("Ada", "ada@example.com")
