from bookwise.domain import catalog
from bookwise.prompts.templates import (
    RECOMMEND_BOOKS,
    estimate_tokens,
    format_catalog,
    render_recommendation_prompt,
    truncate_to_tokens,
)


def test_every_catalog_book_is_embedded():
    prompt = render_recommendation_prompt(catalog.BOOKS, "scary")

    assert set(prompt) == {"system", "user"}
    for book in catalog.BOOKS:
        assert f'- ID: {book.id}, Title: "{book.title}" by {book.author}' in prompt["user"]
    assert 'User Request: "scary"' in prompt["user"]


def test_json_example_renders_single_braces():
    user = render_recommendation_prompt(catalog.BOOKS[:1], "x")["user"]
    assert '  {\n    "id": "1",' in user
    assert "{{" not in user


def test_query_with_braces_is_left_alone():
    user = render_recommendation_prompt(catalog.BOOKS[:1], "{catalog} please")["user"]
    assert 'User Request: "{catalog} please"' in user


def test_long_query_is_truncated():
    query = "a" * (RECOMMEND_BOOKS.input_token_limit * 4 + 100)
    user = render_recommendation_prompt(catalog.BOOKS[:1], query)["user"]
    assert query not in user
    assert " [truncated]" in user


def test_format_catalog_one_line_per_book():
    lines = format_catalog(catalog.BOOKS[:3]).splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("- ID: 1, ")


def test_truncate_to_tokens_keeps_short_text():
    assert truncate_to_tokens("short", 10) == "short"


def test_estimate_tokens():
    assert estimate_tokens("abcd" * 10) == 10
