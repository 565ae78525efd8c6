"""Unit tests for pattern strings."""

import pytest

from inputmask import PatternError, create_input_mask_from_pattern
from inputmask.core.patterns import split_pattern, template_from_pattern


class TestSplitPattern:
    """Test split_pattern."""

    def test_placeholders_and_literals(self):
        assert split_pattern("(##)") == ["(", None, None, ")"]

    def test_empty_pattern(self):
        assert split_pattern("") == []

    def test_escaped_token_is_literal(self):
        assert split_pattern("\\##") == ["#", None]

    def test_escaped_escape_is_literal(self):
        assert split_pattern("\\\\#") == ["\\", None]

    def test_custom_token_char(self):
        assert split_pattern("9-#", token_char="9") == [None, "-", "#"]

    def test_dangling_escape(self):
        with pytest.raises(PatternError) as exc_info:
            split_pattern("##\\")
        assert exc_info.value.context["position"] == 2

    @pytest.mark.parametrize("token_char", ["", "##", 1])
    def test_invalid_token_char(self, token_char):
        with pytest.raises(PatternError):
            split_pattern("##", token_char=token_char)

    def test_token_and_escape_must_differ(self):
        with pytest.raises(PatternError):
            split_pattern("##", token_char="#", escape_char="#")

    def test_non_string_pattern(self):
        with pytest.raises(PatternError):
            split_pattern(None)


class TestTemplateFromPattern:
    """Test template_from_pattern."""

    def test_template_fn_substitutes_token(self):
        template_fn = template_from_pattern("##/##")
        assert template_fn("T") == ["T", "T", "/", "T", "T"]

    def test_invalid_pattern_fails_immediately(self):
        with pytest.raises(PatternError):
            template_from_pattern("#\\")

    def test_mask_with_escaped_token(self):
        input_mask = create_input_mask_from_pattern("\\#####")
        assert input_mask.token_count == 4
        assert input_mask.mask("1234") == "#1234"

    def test_mask_with_custom_token_char(self):
        input_mask = create_input_mask_from_pattern("+1 (XXX) XXX", token_char="X")
        assert input_mask.mask("212555") == "+1 (212) 555"
