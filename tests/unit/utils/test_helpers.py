"""
Tests unitaires pour les fonctions utilitaires de normalisation.
"""

import pytest

from filmdepot.utils.helpers import (
    clean_title,
    get_string_tokens_without_punctuation,
    remove_diacritics,
)


class TestGetStringTokensWithoutPunctuation:
    """Tests pour la tokenisation normalisee."""

    def test_lowercases_and_splits_on_whitespace(self) -> None:
        assert get_string_tokens_without_punctuation("  Licorice   PIZZA ") == [
            "licorice",
            "pizza",
        ]

    def test_strips_edge_punctuation_and_drops_empty_tokens(self) -> None:
        """La ponctuation en bordure disparait, les tokens vides sont ecartes."""
        tokens = get_string_tokens_without_punctuation("??? licorice ==> piZZa (2021)%%$$##")
        assert tokens == ["licorice", "pizza", "2021"]

    def test_keeps_inner_punctuation(self) -> None:
        assert get_string_tokens_without_punctuation("Co-op: the movie!") == [
            "co-op",
            "the",
            "movie",
        ]

    def test_removes_diacritics_by_default(self) -> None:
        assert get_string_tokens_without_punctuation("Le Fabuleux Destin d'Amélie") == [
            "le",
            "fabuleux",
            "destin",
            "d'amelie",
        ]

    def test_can_keep_diacritics(self) -> None:
        tokens = get_string_tokens_without_punctuation("Amélie", strip_diacritics=False)
        assert tokens == ["amélie"]

    @pytest.mark.parametrize("text", [None, "", "   ", "?!... ---"])
    def test_empty_input_gives_no_tokens(self, text) -> None:
        assert get_string_tokens_without_punctuation(text) == []

    def test_token_order_is_preserved(self) -> None:
        assert get_string_tokens_without_punctuation("Pizza Licorice") == ["pizza", "licorice"]


class TestRemoveDiacritics:
    def test_removes_accents(self) -> None:
        assert remove_diacritics("Amélie Poulain à Noël") == "Amelie Poulain a Noel"

    def test_leaves_plain_text_unchanged(self) -> None:
        assert remove_diacritics("Sicario") == "Sicario"


class TestCleanTitle:
    def test_removes_invisible_chars(self) -> None:
        assert clean_title("\u200eThe Fly\u200f ") == "The Fly"

    def test_none_passthrough(self) -> None:
        assert clean_title(None) is None
