from pathlib import Path

import pytest

from shared.config import DEFAULT_REQUIREMENT_TYPES, DEFAULT_REQUIREMENTS_ROOT
from shared.requirements_settings import (
    load_config_file,
    load_requirements_settings,
    parse_level,
    parse_requirement_types,
)


def test_parse_requirement_types_uses_fallback_when_empty() -> None:
    assert parse_requirement_types("") == DEFAULT_REQUIREMENT_TYPES
    assert parse_requirement_types(None, fallback=("story",)) == ("story",)


def test_parse_requirement_types_parses_csv_and_lists() -> None:
    assert parse_requirement_types(" epic, feature ,,story ") == ("epic", "feature", "story")
    assert parse_requirement_types(["Epic", " story", ""]) == ("Epic", "story")


def test_parse_level() -> None:
    assert parse_level(None) == 0
    assert parse_level(" ", default=3) == 3
    assert parse_level("2") == 2
    assert parse_level(1) == 1
    with pytest.raises(ValueError):
        parse_level("two")


def test_defaults_without_env_or_file(tmp_path: Path) -> None:
    settings = load_requirements_settings({}, config_path=tmp_path / "missing.yaml")
    assert settings.root_directory == DEFAULT_REQUIREMENTS_ROOT
    assert settings.requirement_types == DEFAULT_REQUIREMENT_TYPES
    assert settings.baseline_level == 0


def test_config_file_values(tmp_path: Path) -> None:
    cfg = tmp_path / "requirements.yaml"
    cfg.write_text(
        "root_directory: src/test/resources/stories\n"
        "requirement_types: epic, story\n"
        "level: 1\n",
        encoding="utf-8",
    )

    settings = load_requirements_settings({}, config_path=cfg)

    assert settings.root_directory == "src/test/resources/stories"
    assert settings.requirement_types == ("epic", "story")
    assert settings.baseline_level == 1


def test_environment_overrides_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "requirements.yaml"
    cfg.write_text("root_directory: from_file\nrequirement_types: [epic, story]\nlevel: 1\n", encoding="utf-8")

    settings = load_requirements_settings(
        {
            "REQUIREMENTS_CONFIG": str(cfg),
            "REQUIREMENTS_ROOT": "from_env",
            "REQUIREMENT_TYPES": "theme,feature",
            "REQUIREMENTS_LEVEL": "2",
        }
    )

    assert settings.root_directory == "from_env"
    assert settings.requirement_types == ("theme", "feature")
    assert settings.baseline_level == 2


def test_default_config_file_is_read_from_working_directory(tmp_path: Path) -> None:
    (tmp_path / "requirements.yaml").write_text("requirement_types: [module]\n", encoding="utf-8")
    assert load_requirements_settings({}).requirement_types == ("module",)


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "requirements.yaml"
    cfg.write_text("- epic\n- story\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config_file(cfg)


def test_empty_config_file_is_empty_mapping(tmp_path: Path) -> None:
    cfg = tmp_path / "requirements.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_config_file(cfg) == {}
