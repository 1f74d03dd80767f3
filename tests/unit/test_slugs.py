import pytest

from behaviorable.utils import slugs


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Café de Flore!!", "cafe-de-flore"),
        ("The Matrix", "the-matrix"),
        ("  Many   spaces\there  ", "many-spaces-here"),
        ("Déjà Vu -- Ünïcödé", "deja-vu----unicode"),
        ("100% Pure & Simple", "100-pure-simple"),
        ("!!!", ""),
    ],
)
def test_generate_slug(text, expected):
    assert slugs.generate_slug(text) == expected


def test_generate_slug_truncates_then_trims():
    text = "word " * 20
    slug = slugs.generate_slug(text)
    assert len(slug) <= 45
    assert not slug.endswith("-")
    assert slug == "-".join(["word"] * 9)


def test_generate_slug_custom_length():
    assert slugs.generate_slug("abcdef ghi", max_length=6) == "abcdef"


def test_remove_diacritics():
    assert slugs.remove_diacritics("Crème brûlée") == "Creme brulee"


def test_join_slug_skips_none_and_empty_fragments():
    assert slugs.join_slug(["The Matrix", None, "!!", 1999]) == "the-matrix-1999"


@pytest.mark.parametrize(
    "slug,expected",
    [
        ("the-matrix", 1),
        ("the-matrix__2", 2),
        ("the-matrix__17", 17),
        ("the-matrix__x", 1),
        ("the-matrix__", 1),
    ],
)
def test_split_counter(slug, expected):
    assert slugs.split_counter(slug, "__") == expected
