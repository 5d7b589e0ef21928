import pytest

from src.util.icon_names import format_icon_name


class TestFormatIconName:
    """Test suite for format_icon_name"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("document table", "DocumentTable"),
            ("API management", "ApiManagement"),
            ("text DOCUMENT", "TextDocument"),
            ("add square", "AddSquare"),
            ("Settings", "Settings"),
            ("  document   toolbox  ", "DocumentToolbox"),
            ("document\ttext", "DocumentText"),
        ],
    )
    def test_formats_words(self, raw: str, expected: str) -> None:
        assert format_icon_name(raw) == expected

    @pytest.mark.parametrize("raw", ["", " ", "   ", "\t\n", None])
    def test_blank_input_falls_back_to_document(self, raw) -> None:
        assert format_icon_name(raw) == "Document"

    @pytest.mark.parametrize("raw", ["home", "SETTINGS", "apps", "  Document "])
    def test_formatting_is_stable(self, raw: str) -> None:
        """Re-formatting a formatted single-word name keeps it unchanged"""
        formatted = format_icon_name(raw)
        assert format_icon_name(formatted) == formatted

    def test_acronyms_are_not_preserved(self) -> None:
        assert format_icon_name("API") == "Api"

    def test_joined_words_are_one_token(self) -> None:
        """Already-joined names are a single word and lose inner capitals"""
        assert format_icon_name("DocumentTable") == "Documenttable"
