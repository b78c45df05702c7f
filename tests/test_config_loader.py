"""Tests for config loading."""

import json
import sys

import pytest

from ghupload.core.config_loader import default_config_path, load_uploader_config
from ghupload.core.exceptions import ConfigError
from ghupload.core.models import DEFAULT_COMMIT_MESSAGE


def test_loads_the_four_fields(config_file):
	config = load_uploader_config(config_file)

	assert config.repo == "owner/project"
	assert config.branch == "main"
	assert config.token == "secret"
	assert config.path == "image/2023"
	assert config.message == DEFAULT_COMMIT_MESSAGE
	assert config.timeout == 10.0


def test_default_path_sits_beside_the_executable(tmp_path, monkeypatch, config_file):
	monkeypatch.setattr(sys, "argv", [str(tmp_path / "ghupload")])

	assert default_config_path() == tmp_path.resolve() / "config.json"
	assert load_uploader_config().repo == "owner/project"


def test_missing_file_raises(tmp_path):
	with pytest.raises(ConfigError):
		load_uploader_config(tmp_path / "nope.json")


def test_invalid_json_raises(tmp_path):
	path = tmp_path / "config.json"
	path.write_text("{not json", encoding="utf-8")

	with pytest.raises(ConfigError):
		load_uploader_config(path)


def test_non_object_raises(tmp_path):
	path = tmp_path / "config.json"
	path.write_text("[1, 2]", encoding="utf-8")

	with pytest.raises(ConfigError):
		load_uploader_config(path)


def test_missing_fields_are_not_validated(tmp_path):
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "owner/project"}), encoding="utf-8")

	config = load_uploader_config(path)

	assert config.repo == "owner/project"
	assert config.branch == ""
	assert config.path == ""


def test_yaml_config(tmp_path):
	path = tmp_path / "config.yaml"
	path.write_text("repo: owner/project\nbranch: dev\ntoken: abc\npath: img\nmessage: add image\n", encoding="utf-8")

	config = load_uploader_config(path)

	assert config.branch == "dev"
	assert config.message == "add image"


def test_environment_expansion(tmp_path, monkeypatch):
	monkeypatch.setenv("UPLOAD_TOKEN", "from-env")
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "o/p", "branch": "main", "token": "${UPLOAD_TOKEN}", "path": "x"}), encoding="utf-8")

	assert load_uploader_config(path).token == "from-env"


def test_empty_token_falls_back_to_gh_token(tmp_path, monkeypatch):
	monkeypatch.setenv("GH_TOKEN", "gh-env-token")
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "o/p", "branch": "main", "token": "", "path": "x"}), encoding="utf-8")

	assert load_uploader_config(path).token == "gh-env-token"


def test_unset_token_reference_falls_back_to_gh_token(tmp_path, monkeypatch):
	monkeypatch.delenv("UNSET_UPLOAD_TOKEN", raising=False)
	monkeypatch.setenv("GH_TOKEN", "gh-env-token")
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "o/p", "branch": "main", "token": "${UNSET_UPLOAD_TOKEN}", "path": "x"}), encoding="utf-8")

	assert load_uploader_config(path).token == "gh-env-token"


def test_unset_token_reference_without_fallback_is_empty(tmp_path, monkeypatch):
	monkeypatch.delenv("UNSET_UPLOAD_TOKEN", raising=False)
	monkeypatch.delenv("GH_TOKEN", raising=False)
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "o/p", "branch": "main", "token": "$UNSET_UPLOAD_TOKEN", "path": "x"}), encoding="utf-8")

	assert load_uploader_config(path).token == ""


def test_explicit_zero_timeout_is_kept(tmp_path):
	path = tmp_path / "config.json"
	path.write_text(json.dumps({"repo": "o/p", "branch": "main", "token": "t", "path": "x", "timeout": 0}), encoding="utf-8")

	assert load_uploader_config(path).timeout == 0.0
