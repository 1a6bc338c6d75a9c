"""
Structured, reusable, versioned prompt templates for LLM interactions.

Design Principles:
  1. Prompts are immutable dataclass objects; adapters hold no inline prompt strings.
  2. Each template is versioned for traceability.
  3. Templates are adapter-agnostic: same template works with Bedrock, OpenAI, Ollama.
  4. User-supplied text is truncated here (not in adapters) with configurable limits.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

from bookwise.domain.models import Book


# ── Token Estimation ─────────────────────────────────────────────
# Rough estimate: 1 token ≈ 4 characters for English text.

CHARS_PER_TOKEN = 4


def estimate_tokens(text: str) -> int:
    """Estimate token count from character length."""
    return len(text) // CHARS_PER_TOKEN


def truncate_to_tokens(text: str, max_tokens: int) -> str:
    """Truncate text to approximately max_tokens."""
    max_chars = max_tokens * CHARS_PER_TOKEN
    if len(text) <= max_chars:
        return text
    truncated = text[:max_chars]
    # Cut at the last sentence boundary to avoid mid-sentence truncation
    last_period = truncated.rfind(".")
    if last_period > max_chars * 0.8:
        truncated = truncated[: last_period + 1]
    return truncated + " [truncated]"


# ── Prompt Template ──────────────────────────────────────────────

@dataclass(frozen=True)
class PromptTemplate:
    """
    Immutable prompt template with system persona and user message.

    Attributes:
        name:              Unique identifier for logging and tracking.
        version:           Semantic version for prompt iteration tracking.
        system:            System message defining the LLM persona and constraints.
        user_template:     User message template with {variable} placeholders.
        max_tokens:        Maximum output tokens requested from the LLM.
        input_token_limit: Maximum tokens for the truncated input field.
        tags:              Metadata tags for categorization.
    """

    name: str
    version: str
    system: str
    user_template: str
    max_tokens: int = 1024
    input_token_limit: int = 4000
    tags: tuple[str, ...] = field(default_factory=tuple)

    def render(self, **kwargs: str) -> dict[str, str]:
        """Render template with variables, returning system + user messages."""
        return {
            "system": self.system,
            "user": self.user_template.format(**kwargs),
        }

    def render_with_truncation(self, content_key: str, **kwargs: str) -> dict[str, str]:
        """Render template, truncating the specified field to fit token limits."""
        if content_key in kwargs:
            kwargs[content_key] = truncate_to_tokens(
                kwargs[content_key], self.input_token_limit
            )
        return self.render(**kwargs)


# ── Book Recommendation Prompt ───────────────────────────────────

RECOMMEND_BOOKS = PromptTemplate(
    name="recommend_books",
    version="2.0.0",
    system=(
        "You are an expert librarian AI with deep knowledge of literature and "
        "reader preferences. Analyze the user's request carefully and recommend "
        "books that truly match their interests. You may only recommend books "
        "from the catalog you are given, referenced by their catalog ID."
    ),
    user_template=(
        "Available Books Catalog:\n"
        "{catalog}\n\n"
        'User Request: "{query}"\n\n'
        "ANALYSIS INSTRUCTIONS:\n"
        "1. Identify the KEY THEMES, GENRES, MOODS, or SPECIFIC ELEMENTS the user is looking for.\n"
        "2. Look for genre preferences, emotional tone, character types, settings, themes, writing style.\n"
        "3. Match books on CONTENT SIMILARITY, not just genre labels.\n"
        "4. Consider explicit requests (\"mystery novels\") and implicit ones "
        "(\"something dark\" = thriller/mystery).\n\n"
        "KEYWORD ANALYSIS EXAMPLES:\n"
        "- \"scary\" → Horror, Thriller, Dark themes → Gone Girl, The Girl with the Dragon Tattoo, The Handmaid's Tale\n"
        "- \"romance\" → Love stories, relationships → Pride and Prejudice, People We Meet on Vacation, Normal People\n"
        "- \"fantasy\" → Magic, mythical worlds → Harry Potter, The Hobbit, Circe\n"
        "- \"inspiring\" → Uplifting, motivational → Becoming, Atomic Habits, The Alchemist\n"
        "- \"classic\" → Timeless literature → Pride and Prejudice, To Kill a Mockingbird, The Great Gatsby\n"
        "- \"adventure\" → Action, journey → Life of Pi, The Hobbit, Dune\n"
        "- \"sad\" → Emotional, tragic → The Fault in Our Stars, The Book Thief, The Kite Runner\n"
        "- \"funny\" → Humor, light-hearted → The Thursday Murder Club, The Hobbit\n"
        "- \"deep\" → Philosophical, thought-provoking → The Alchemist, Educated, The Handmaid's Tale\n\n"
        "RESPONSE FORMAT (JSON only, no additional text):\n"
        "[\n"
        "  {{\n"
        '    "id": "1",\n'
        '    "bookId": "book_id_from_catalog",\n'
        '    "reason": "Detailed explanation connecting the request to this book\'s themes, mood and content.",\n'
        '    "confidence": 0.95\n'
        "  }}\n"
        "]\n\n"
        "QUALITY REQUIREMENTS:\n"
        "- Provide 2-4 recommendations maximum.\n"
        "- Confidence scores between 0.7 and 1.0 (higher for better matches).\n"
        "- Each reason should be 2-3 sentences explaining the connection.\n"
        "- Prioritize QUALITY matches over quantity.\n\n"
        "Now analyze the user's request and provide personalized book recommendations:"
    ),
    max_tokens=1500,
    input_token_limit=500,
    tags=("recommendation", "catalog", "json"),
)


# ── Rendering Helpers ────────────────────────────────────────────

def format_catalog(books: Sequence[Book]) -> str:
    """One line per book: ID, quoted title, author, genre and description."""
    return "\n".join(
        f'- ID: {b.id}, Title: "{b.title}" by {b.author} ({b.genre}): {b.description}'
        for b in books
    )


def render_recommendation_prompt(books: Sequence[Book], query: str) -> dict[str, str]:
    """
    Render the recommendation prompt.

    Args:
        books: Catalog the model must choose from; every book is embedded.
        query: Free-text reader request, truncated to the template limit.

    Returns:
        Dict with 'system' and 'user' keys ready for any LLM adapter.
    """
    return RECOMMEND_BOOKS.render_with_truncation(
        content_key="query",
        catalog=format_catalog(books),
        query=query,
    )
