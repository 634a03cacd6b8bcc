"""Unit tests for plugopt.i18n.bundle — locale tags, file chains and
message lookup with fallback.
"""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from plugopt.i18n.bundle import (
    MessageBundle,
    MissingMessageError,
    locale_suffixes,
    normalize_locale,
)
from plugopt.options.errors import PlugoptError


@pytest.fixture()
def bundle_dir(tmp_path: Path) -> Path:
    (tmp_path / "demo.yaml").write_text(
        'greeting: "Hello {0}"\nfarewell: "Goodbye"\nonly_root: "root"\n',
        encoding="utf-8",
    )
    (tmp_path / "demo_de.yaml").write_text(
        'greeting: "Hallo {0}"\nfarewell: "Auf Wiedersehen"\n', encoding="utf-8"
    )
    (tmp_path / "demo_de_CH.yaml").write_text('farewell: "Uf Widerluege"\n', encoding="utf-8")
    return tmp_path


class TestLocaleTags:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [("", ""), ("root", ""), ("de", "de"), ("DE", "de"), ("de_ch", "de-CH"), ("de-CH", "de-CH")],
    )
    def test_normalize_locale(self, tag: str, expected: str) -> None:
        assert normalize_locale(tag) == expected

    def test_suffixes_root(self) -> None:
        assert locale_suffixes("") == [""]

    def test_suffixes_region(self) -> None:
        assert locale_suffixes("de-CH") == ["", "_de", "_de_CH"]


class TestLoad:
    def test_root_bundle(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "", bundle_dir)
        assert bundle.get("farewell") == "Goodbye"
        assert bundle.locale == ""

    def test_language_overrides_root(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "de", bundle_dir)
        assert bundle.get("farewell") == "Auf Wiedersehen"

    def test_region_falls_back_to_language_and_root(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "de-CH", bundle_dir)
        assert bundle.get("farewell") == "Uf Widerluege"
        assert bundle.get("greeting") == "Hallo {0}"
        assert bundle.get("only_root") == "root"

    def test_unknown_locale_uses_root(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "fr", bundle_dir)
        assert bundle.get("farewell") == "Goodbye"

    def test_missing_bundle_is_empty_and_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="plugopt.i18n.bundle"):
            bundle = MessageBundle.load("absent", "", tmp_path)
        assert len(bundle) == 0
        assert "absent" in caplog.text

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        (tmp_path / "broken.yaml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(PlugoptError):
            MessageBundle.load("broken", "", tmp_path)

    def test_empty_file_is_empty_bundle(self, tmp_path: Path) -> None:
        (tmp_path / "blank.yaml").write_text("", encoding="utf-8")
        assert len(MessageBundle.load("blank", "", tmp_path)) == 0


class TestLookup:
    def test_format_positional(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "de", bundle_dir)
        assert bundle.format("greeting", "Welt") == "Hallo Welt"

    def test_missing_key_raises(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "", bundle_dir)
        with pytest.raises(MissingMessageError) as excinfo:
            bundle.get("nope")
        assert excinfo.value.key == "nope"
        assert excinfo.value.bundle == "demo"
        assert "nope" in str(excinfo.value)

    def test_missing_key_is_key_error(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "", bundle_dir)
        with pytest.raises(KeyError):
            bundle.get("nope")

    def test_missing_key_default(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "", bundle_dir)
        assert bundle.get("nope", "fallback") == "fallback"

    def test_contains_and_keys(self, bundle_dir: Path) -> None:
        bundle = MessageBundle.load("demo", "", bundle_dir)
        assert "greeting" in bundle
        assert bundle.keys() == ["farewell", "greeting", "only_root"]
