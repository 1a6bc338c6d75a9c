"""
Keyword category table for the fallback recommender.

Order matters: the first category whose keywords appear in a query wins, so
an ambiguous query such as "scary romance" resolves to ``SCARY``. Each
category lists at most seven ``(book_id, reason)`` picks, best match first.
"""

from dataclasses import dataclass
from enum import Enum


class CategoryTag(str, Enum):
    SCARY = "scary"
    ROMANCE = "romance"
    FANTASY = "fantasy"
    INSPIRING = "inspiring"
    CLASSIC = "classic"
    ADVENTURE = "adventure"
    SAD = "sad"
    FUNNY = "funny"
    SCIENTIFIC = "scientific"


@dataclass(frozen=True)
class Category:
    tag: CategoryTag
    keywords: tuple[str, ...]
    picks: tuple[tuple[str, str], ...]

    def matches(self, normalized_query: str) -> bool:
        return any(keyword in normalized_query for keyword in self.keywords)


CATEGORIES: tuple[Category, ...] = (
    Category(
        tag=CategoryTag.SCARY,
        keywords=("scary", "horror", "dark", "thriller", "suspense", "creepy", "frightening"),
        picks=(
            (
                "18",
                "Gone Girl is a psychological thriller with dark, twisted themes that will keep you on edge with its disturbing portrayal of a marriage gone wrong.",
            ),
            (
                "23",
                "The Girl with the Dragon Tattoo offers a dark, gritty thriller with disturbing elements and complex mystery that matches your interest in scary content.",
            ),
            (
                "15",
                "The Handmaid's Tale presents a chilling dystopian world that explores dark themes of control and oppression, creating a truly unsettling reading experience.",
            ),
            (
                "3",
                "The Silent Patient is a psychological thriller with dark twists and disturbing revelations that will keep you guessing until the shocking end.",
            ),
            (
                "34",
                "Mexican Gothic is a Victorian Gothic horror set in 1950s Mexico, featuring supernatural elements and genuinely creepy atmosphere.",
            ),
            (
                "37",
                "Verity is a psychological thriller about a writer and dark secrets that will leave you questioning what's real and what's manipulation.",
            ),
            (
                "35",
                "The Sanatorium is a chilling thriller set in a remote Swiss hotel where murders unfold in an isolated, claustrophobic setting.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.ROMANCE,
        keywords=("romance", "love", "romantic", "relationship", "dating"),
        picks=(
            (
                "4",
                "People We Meet on Vacation is a perfect romance about two best friends discovering love, with heartwarming relationship dynamics and emotional depth.",
            ),
            (
                "28",
                "Pride and Prejudice is the quintessential romance novel, featuring the iconic love story between Elizabeth Bennet and Mr. Darcy with wit and charm.",
            ),
            (
                "16",
                "Normal People explores a complex, intimate relationship between two people over many years, offering deep emotional connection and realistic romance.",
            ),
            (
                "6",
                "The Seven Husbands of Evelyn Hugo tells the captivating love story of a Hollywood icon, filled with passion, secrets, and romantic drama.",
            ),
            (
                "36",
                "It Ends with Us is a powerful romance about love, resilience, and difficult choices that will make you believe in the strength of the human heart.",
            ),
            (
                "40",
                "Beach Read features two rival writers who challenge each other to write outside their genres, leading to unexpected romance and personal growth.",
            ),
            (
                "20",
                "The Fault in Our Stars is a beautiful, heartbreaking love story between two teenagers that will make you believe in the power of first love.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.FANTASY,
        keywords=("fantasy", "magic", "magical", "wizard", "mythical", "supernatural"),
        picks=(
            (
                "25",
                "Harry Potter and the Sorcerer's Stone is the perfect introduction to magical worlds, featuring wizards, spells, and enchanting adventures at Hogwarts.",
            ),
            (
                "22",
                "The Hobbit offers a classic fantasy adventure with magical creatures, wizards, and epic quests through Middle-earth's enchanted landscapes.",
            ),
            (
                "13",
                "Circe reimagines Greek mythology with beautiful, magical storytelling about the goddess Circe and her supernatural powers and transformations.",
            ),
            (
                "12",
                "The Invisible Life of Addie LaRue features a woman cursed with immortality and magic, blending fantasy elements with beautiful storytelling.",
            ),
            (
                "43",
                "The Priory of the Orange Tree is an epic fantasy featuring dragons, ancient magic, and a richly detailed world full of mythical creatures.",
            ),
            (
                "49",
                "The House in the Cerulean Sea is a heartwarming fantasy about found family, magical creatures, and acceptance in a whimsical setting.",
            ),
            (
                "70",
                "Six of Crows features a crew of criminals with magical abilities attempting an impossible heist in a richly imagined fantasy world.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.INSPIRING,
        keywords=("inspiring", "motivational", "uplifting", "positive", "hope", "success"),
        picks=(
            (
                "5",
                "Atomic Habits provides practical, inspiring guidance on building positive life changes through small, consistent actions that lead to remarkable results.",
            ),
            (
                "21",
                "Becoming by Michelle Obama is deeply inspiring, sharing her journey from childhood to First Lady with wisdom, hope, and empowering life lessons.",
            ),
            (
                "14",
                "The Alchemist is an uplifting tale about following your dreams and finding your purpose, filled with inspiring wisdom about life's journey.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.CLASSIC,
        keywords=("classic", "literature", "timeless", "famous", "important"),
        picks=(
            (
                "26",
                "To Kill a Mockingbird is a timeless classic that addresses important themes of justice and morality through beautiful, enduring storytelling.",
            ),
            (
                "19",
                "The Great Gatsby is one of literature's most celebrated classics, offering profound insights into the American Dream with elegant prose.",
            ),
            (
                "24",
                "The Catcher in the Rye is a influential classic that captures the voice of youth and alienation with honest, memorable storytelling.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.ADVENTURE,
        keywords=("adventure", "action", "journey", "travel", "exploration"),
        picks=(
            (
                "30",
                "Life of Pi is an extraordinary adventure story about survival on the ocean with a Bengal tiger, combining thrilling action with philosophical depth.",
            ),
            (
                "22",
                "The Hobbit is the ultimate adventure tale, following Bilbo Baggins on an epic journey through dangerous lands filled with excitement and discovery.",
            ),
            (
                "7",
                "Dune offers epic space adventure on a desert planet with political intrigue, action, and exploration of a vast, complex universe.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.SAD,
        keywords=("sad", "emotional", "tragic", "heartbreaking", "cry", "tears"),
        picks=(
            (
                "20",
                "The Fault in Our Stars is a deeply emotional story about young love in the face of tragedy, guaranteed to move you to tears with its heartbreaking beauty.",
            ),
            (
                "27",
                "The Book Thief tells a tragic yet beautiful story set during WWII, narrated by Death, offering profound emotional impact about humanity and loss.",
            ),
            (
                "17",
                "The Kite Runner is an emotionally powerful story of friendship, guilt, and redemption set against the backdrop of Afghanistan's tragic history.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.FUNNY,
        keywords=("funny", "humor", "comedy", "laugh", "amusing", "witty"),
        picks=(
            (
                "8",
                "The Thursday Murder Club combines mystery with delightful humor, featuring charming elderly characters solving crimes with wit and amusing banter.",
            ),
            (
                "22",
                "The Hobbit has wonderful moments of humor and whimsy throughout Bilbo's adventure, with Tolkien's charming and often amusing storytelling style.",
            ),
            (
                "28",
                "Pride and Prejudice is filled with Jane Austen's sharp wit and social satire, offering clever dialogue and amusing observations about society.",
            ),
        ),
    ),
    Category(
        tag=CategoryTag.SCIENTIFIC,
        keywords=("science", "space", "sci-fi", "future", "technology", "scientific"),
        picks=(
            (
                "2",
                "Project Hail Mary is a brilliant science fiction story combining hard science with thrilling space adventure and problem-solving.",
            ),
            (
                "7",
                "Dune is a masterpiece of science fiction, featuring advanced technology, space travel, and complex scientific concepts in an epic setting.",
            ),
            (
                "15",
                "The Handmaid's Tale presents a chilling vision of the future, exploring how technology and science can be used for social control.",
            ),
        ),
    ),
)

# Used when no category matches. ``{query}`` is replaced with the raw query.
GENERIC_PICKS: tuple[tuple[str, str, float], ...] = (
    (
        "1",
        'Based on your query "{query}", I recommend The Midnight Library for its '
        "thought-provoking exploration of life's possibilities and meaningful "
        "storytelling that appeals to many readers.",
        0.80,
    ),
    (
        "6",
        'For "{query}": The Seven Husbands of Evelyn Hugo offers engaging '
        "storytelling with rich character development that many readers find "
        "captivating, making it a great match for your interests.",
        0.75,
    ),
    (
        "10",
        'For "{query}": The Song of Achilles provides beautiful, emotional '
        "storytelling that resonates with readers looking for compelling "
        "narratives and well-developed characters.",
        0.70,
    ),
    (
        "11",
        'For "{query}": Where the Crawdads Sing combines mystery with beautiful '
        "nature writing, offering an engaging story that appeals to diverse "
        "reading preferences.",
        0.68,
    ),
)
