"""Unit tests for PresetLoader."""

from pathlib import Path

import pytest

from inputmask import PresetConfig, PresetError, PresetLoader


def write(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestPresetLoader:
    """Test loading presets from YAML files."""

    def test_shorthand_and_full_entries(self, tmp_path):
        preset_file = write(
            tmp_path / "presets.yaml",
            """
presets:
  phone_de: "+49 ### #######"
  order_id:
    pattern: "ORD-****"
    token_char: "*"
    description: Internal order number
""",
        )
        presets = PresetLoader().load_presets(preset_file)
        assert presets["phone_de"] == PresetConfig(pattern="+49 ### #######")
        assert presets["order_id"].token_char == "*"
        assert presets["order_id"].description == "Internal order number"

    def test_empty_file(self, tmp_path):
        preset_file = write(tmp_path / "empty.yaml", "")
        assert PresetLoader().load_presets(preset_file) == {}

    def test_relative_path_uses_base_path(self, tmp_path):
        write(tmp_path / "presets.yaml", "presets:\n  pin: '####'\n")
        presets = PresetLoader(base_path=tmp_path).load_presets("presets.yaml")
        assert presets["pin"].pattern == "####"

    def test_extends_merges_and_overrides(self, tmp_path):
        write(
            tmp_path / "base.yaml",
            "presets:\n  pin: '####'\n  zip: '#####'\n",
        )
        child = write(
            tmp_path / "child.yaml",
            "extends: base.yaml\npresets:\n  pin: '######'\n",
        )
        presets = PresetLoader().load_presets(child)
        assert presets["pin"].pattern == "######"
        assert presets["zip"].pattern == "#####"

    def test_extends_list(self, tmp_path):
        write(tmp_path / "a.yaml", "presets:\n  a: '#'\n")
        write(tmp_path / "b.yaml", "presets:\n  b: '##'\n")
        child = write(tmp_path / "c.yaml", "extends: [a.yaml, b.yaml]\n")
        assert set(PresetLoader().load_presets(child)) == {"a", "b"}

    def test_circular_inheritance(self, tmp_path):
        write(tmp_path / "a.yaml", "extends: b.yaml\n")
        write(tmp_path / "b.yaml", "extends: a.yaml\n")
        with pytest.raises(PresetError, match="Circular inheritance"):
            PresetLoader().load_presets(tmp_path / "a.yaml")

    def test_missing_file(self, tmp_path):
        with pytest.raises(PresetError, match="not found"):
            PresetLoader().load_presets(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        preset_file = write(tmp_path / "bad.yaml", "presets: [unclosed\n")
        with pytest.raises(PresetError, match="Invalid YAML"):
            PresetLoader().load_presets(preset_file)

    def test_non_mapping_document(self, tmp_path):
        preset_file = write(tmp_path / "list.yaml", "- one\n- two\n")
        with pytest.raises(PresetError, match="must contain a mapping"):
            PresetLoader().load_presets(preset_file)

    def test_schema_violation(self, tmp_path):
        preset_file = write(
            tmp_path / "bad.yaml",
            "presets:\n  pin:\n    pattern: '####'\n    token_char: '##'\n",
        )
        with pytest.raises(PresetError, match="Schema validation failed"):
            PresetLoader().load_presets(preset_file)

    def test_invalid_pattern(self, tmp_path):
        preset_file = write(tmp_path / "bad.yaml", "presets:\n  pin: '###\\'\n")
        with pytest.raises(PresetError) as exc_info:
            PresetLoader().load_presets(preset_file)
        assert exc_info.value.context["preset_name"] == "pin"

    def test_results_are_cached_per_file(self, tmp_path):
        preset_file = write(tmp_path / "presets.yaml", "presets:\n  pin: '####'\n")
        loader = PresetLoader()
        first = loader.load_presets(preset_file)
        write(preset_file, "presets:\n  pin: '##'\n")
        assert loader.load_presets(preset_file) == first

    def test_validate_preset_file(self, tmp_path):
        good = write(tmp_path / "good.yaml", "presets:\n  pin: '####'\n")
        bad = write(tmp_path / "bad.yaml", "presets: 3\n")
        loader = PresetLoader()
        assert loader.validate_preset_file(good) == []
        errors = loader.validate_preset_file(bad)
        assert len(errors) == 1
        assert "Schema validation failed" in errors[0]
