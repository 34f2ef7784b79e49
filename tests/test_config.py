import pytest

from spkg.config import Config, RepositoryInfo
from spkg.errors import InvalidConfigError

SAMPLE = """\
language: en_US
main_url: https://repo.example.com
build_directory: /tmp/spkg-build
unused: value
old_repo:
  legacy: https://old.example.com
repositories:
  main:
    url: https://repo.example.com/main
    arch: [x86_64, aarch64]
  extra:
    url: https://repo.example.com/extra
    arch: all
"""


def test_parse_sample():
    config = Config.from_yaml(SAMPLE)
    assert config.language == "en_US"
    assert config.main_url == "https://repo.example.com"
    assert config.build_directory == "/tmp/spkg-build"
    assert config.old_repo == {"legacy": "https://old.example.com"}
    assert list(config.repositories) == ["main", "extra"]


def test_list_architectures():
    config = Config.from_yaml(SAMPLE)
    assert config.repositories["main"].architectures() == ("x86_64", "aarch64")


def test_single_architecture():
    config = Config.from_yaml(SAMPLE)
    extra = config.repositories["extra"]
    assert extra.arch == "all"
    assert extra.architectures() == ("all",)
    assert extra.url == "https://repo.example.com/extra"


def test_repository_info_architectures_from_tuple():
    info = RepositoryInfo(url="https://repo.example.com", arch=("x86_64",))
    assert info.architectures() == ("x86_64",)


def test_numeric_language_kept_as_text():
    text = SAMPLE.replace("language: en_US", "language: 1.10")
    assert Config.from_yaml(text).language == "1.10"


def test_missing_field_raises():
    text = SAMPLE.replace("main_url: https://repo.example.com\n", "")
    with pytest.raises(InvalidConfigError):
        Config.from_yaml(text)


def test_missing_old_repo_raises():
    text = SAMPLE.replace("old_repo:\n  legacy: https://old.example.com\n", "")
    with pytest.raises(InvalidConfigError):
        Config.from_yaml(text)


def test_nested_arch_raises():
    text = SAMPLE.replace("arch: all", "arch: {name: all}")
    with pytest.raises(InvalidConfigError):
        Config.from_yaml(text)


def test_invalid_yaml_raises():
    with pytest.raises(InvalidConfigError):
        Config.from_yaml("language: [oops\n")


def test_non_mapping_raises():
    with pytest.raises(InvalidConfigError):
        Config.from_yaml("just text")


def test_load_from_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(SAMPLE, encoding="utf-8")
    assert Config.load(path) == Config.from_yaml(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "missing.yml")