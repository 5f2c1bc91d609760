"""Unit tests for title normalization and slug derivation."""

from blog.util.text import SLUG_MAX_LENGTH, normalize_title, slugify


class TestNormalizeTitle:
    """Tests for normalize_title."""

    def test_case_is_folded(self):
        assert normalize_title("Hello World") == normalize_title("hello world")

    def test_diacritics_are_stripped(self):
        assert normalize_title("Café Crème") == "cafe creme"

    def test_whitespace_is_collapsed_and_trimmed(self):
        assert normalize_title("  Hello \t  World \n") == "hello world"

    def test_combined_variants_collapse_to_one_form(self):
        variants = ["Héllo World", "HELLO   world", " hello world ", "Hello World"]
        assert {normalize_title(v) for v in variants} == {"hello world"}

    def test_different_words_stay_different(self):
        assert normalize_title("Hello World") != normalize_title("Hello Worlds")


class TestSlugify:
    """Tests for slugify."""

    def test_basic_title(self):
        assert slugify("Hello World") == "hello-world"

    def test_punctuation_runs_become_single_hyphen(self):
        assert slugify("Hello,   World!!  Again?") == "hello-world-again"

    def test_leading_and_trailing_symbols_are_stripped(self):
        assert slugify("--- Hello ---") == "hello"

    def test_diacritics_fold_to_ascii(self):
        assert slugify("Café Crème") == "cafe-creme"

    def test_symbol_only_title_gives_empty_slug(self):
        assert slugify("!!! ???") == ""

    def test_non_latin_title_gives_empty_slug(self):
        assert slugify("日本語") == ""

    def test_long_title_is_truncated_without_trailing_hyphen(self):
        # Arrange: a hyphen would land exactly on the cut position
        title = "a" * (SLUG_MAX_LENGTH - 1) + " bcd"

        # Act
        slug = slugify(title)

        # Assert
        assert len(slug) <= SLUG_MAX_LENGTH
        assert not slug.endswith("-")
        assert slug == "a" * (SLUG_MAX_LENGTH - 1)
