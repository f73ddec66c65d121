from __future__ import annotations

from pathlib import Path

from backend.app.requirements.feature_parser import parse_feature_narrative

FEATURE = """@billing
# language: en
Feature: Add items to cart
  In order to buy things
  As a shopper

  Background:
    Given an empty cart

  Scenario: add one item
    When I add an item
"""


def test_feature_title_and_description(tmp_path: Path) -> None:
    fp = tmp_path / "add_item.feature"
    fp.write_text(FEATURE, encoding="utf-8")

    narrative = parse_feature_narrative(fp)

    assert narrative is not None
    assert narrative.title == "Add items to cart"
    assert narrative.type == "feature"
    assert narrative.text == "In order to buy things\nAs a shopper"
    assert narrative.path == str(fp)


def test_description_stops_at_scenario_tag(tmp_path: Path) -> None:
    fp = tmp_path / "cart.feature"
    fp.write_text("Feature: Cart\n  Keep items\n  # internal note\n  @smoke\n  Scenario: x\n", encoding="utf-8")

    narrative = parse_feature_narrative(fp)

    assert narrative.text == "Keep items"


def test_feature_without_title(tmp_path: Path) -> None:
    fp = tmp_path / "untitled.feature"
    fp.write_text("Feature:\n  Something\n", encoding="utf-8")

    narrative = parse_feature_narrative(fp)

    assert narrative.title is None
    assert narrative.text == "Something"


def test_missing_feature_keyword_is_absent(tmp_path: Path) -> None:
    fp = tmp_path / "broken.feature"
    fp.write_text("Scenario: orphan\n  Given nothing\n", encoding="utf-8")
    empty = tmp_path / "empty.feature"
    empty.write_text("", encoding="utf-8")

    assert parse_feature_narrative(fp) is None
    assert parse_feature_narrative(empty) is None
    assert parse_feature_narrative(tmp_path / "missing.feature") is None
