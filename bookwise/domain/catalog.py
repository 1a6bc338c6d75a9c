"""
Static book catalog.

The catalog is fixed for the lifetime of the process: every record is built
at import time and never mutated. Identifiers are short numeric strings and a
handful of titles appear twice under different identifiers.
"""

from bookwise.domain.models import Book

BOOKS: tuple[Book, ...] = (
    Book(
        id="1",
        title="The Midnight Library",
        author="Matt Haig",
        genre="Fiction",
        description="A novel about life, death, and all the lives in between.",
    ),
    Book(
        id="2",
        title="Project Hail Mary",
        author="Andy Weir",
        genre="Science Fiction",
        description="A lone astronaut must save humanity in this thrilling space adventure.",
    ),
    Book(
        id="3",
        title="The Silent Patient",
        author="Alex Michaelides",
        genre="Mystery",
        description="A woman shoots her husband and then never speaks again.",
    ),
    Book(
        id="4",
        title="People We Meet on Vacation",
        author="Emily Henry",
        genre="Romance",
        description="Two best friends. Ten summer trips. One last chance to fall in love.",
    ),
    Book(
        id="5",
        title="Atomic Habits",
        author="James Clear",
        genre="Self-Help",
        description="An easy and proven way to build good habits and break bad ones.",
    ),
    Book(
        id="6",
        title="The Seven Husbands of Evelyn Hugo",
        author="Taylor Jenkins Reid",
        genre="Fiction",
        description="A reclusive Hollywood icon finally tells her story.",
    ),
    Book(
        id="7",
        title="Dune",
        author="Frank Herbert",
        genre="Science Fiction",
        description="Epic space opera set on the desert planet Arrakis.",
    ),
    Book(
        id="8",
        title="The Thursday Murder Club",
        author="Richard Osman",
        genre="Mystery",
        description="Four unlikely friends investigate unsolved killings.",
    ),
    Book(
        id="9",
        title="Educated",
        author="Tara Westover",
        genre="Memoir",
        description="A memoir about education, family, and the struggle for self-invention.",
    ),
    Book(
        id="10",
        title="The Song of Achilles",
        author="Madeline Miller",
        genre="Fiction",
        description="A brilliant reimagining of Homer's Iliad.",
    ),
    Book(
        id="11",
        title="Where the Crawdads Sing",
        author="Delia Owens",
        genre="Fiction",
        description="The story of the mysterious \"Marsh Girl\" and a murder case.",
    ),
    Book(
        id="12",
        title="The Invisible Life of Addie LaRue",
        author="V.E. Schwab",
        genre="Fantasy",
        description="A woman cursed to be forgotten by everyone she meets.",
    ),
    Book(
        id="13",
        title="Circe",
        author="Madeline Miller",
        genre="Fantasy",
        description="The story of the Greek goddess Circe.",
    ),
    Book(
        id="14",
        title="The Alchemist",
        author="Paulo Coelho",
        genre="Fiction",
        description="The mystical story of Santiago, an Andalusian shepherd boy.",
    ),
    Book(
        id="15",
        title="The Handmaid's Tale",
        author="Margaret Atwood",
        genre="Dystopian",
        description="A dystopian tale of a totalitarian society.",
    ),
    Book(
        id="16",
        title="Normal People",
        author="Sally Rooney",
        genre="Fiction",
        description="The complex relationship between Connell and Marianne.",
    ),
    Book(
        id="17",
        title="The Kite Runner",
        author="Khaled Hosseini",
        genre="Fiction",
        description="A story of friendship and redemption in Afghanistan.",
    ),
    Book(
        id="18",
        title="Gone Girl",
        author="Gillian Flynn",
        genre="Thriller",
        description="A psychological thriller about a missing wife.",
    ),
    Book(
        id="19",
        title="The Great Gatsby",
        author="F. Scott Fitzgerald",
        genre="Classic",
        description="The story of Jay Gatsby and the American Dream.",
    ),
    Book(
        id="20",
        title="The Fault in Our Stars",
        author="John Green",
        genre="Young Adult",
        description="A love story between two teenagers with cancer.",
    ),
    Book(
        id="21",
        title="Becoming",
        author="Michelle Obama",
        genre="Biography",
        description="Michelle Obama's memoir of her life and experiences.",
    ),
    Book(
        id="22",
        title="The Hobbit",
        author="J.R.R. Tolkien",
        genre="Fantasy",
        description="The adventure of Bilbo Baggins in Middle-earth.",
    ),
    Book(
        id="23",
        title="The Girl with the Dragon Tattoo",
        author="Stieg Larsson",
        genre="Thriller",
        description="A journalist and hacker investigate a disappearance.",
    ),
    Book(
        id="24",
        title="The Catcher in the Rye",
        author="J.D. Salinger",
        genre="Classic",
        description="The story of Holden Caulfield, a troubled teenager.",
    ),
    Book(
        id="25",
        title="Harry Potter and the Sorcerer's Stone",
        author="J.K. Rowling",
        genre="Fantasy",
        description="The beginning of Harry Potter's magical journey.",
    ),
    Book(
        id="26",
        title="To Kill a Mockingbird",
        author="Harper Lee",
        genre="Classic",
        description="A story of racial injustice in the American South.",
    ),
    Book(
        id="27",
        title="The Book Thief",
        author="Markus Zusak",
        genre="Historical Fiction",
        description="A story narrated by Death during Nazi Germany.",
    ),
    Book(
        id="28",
        title="Pride and Prejudice",
        author="Jane Austen",
        genre="Classic",
        description="The romance between Elizabeth Bennet and Mr. Darcy.",
    ),
    Book(
        id="29",
        title="The Hunger Games",
        author="Suzanne Collins",
        genre="Dystopian",
        description="Katniss Everdeen fights in a deadly televised competition.",
    ),
    Book(
        id="30",
        title="Life of Pi",
        author="Yann Martel",
        genre="Adventure",
        description="A boy survives on a lifeboat with a Bengal tiger.",
    ),
    Book(
        id="31",
        title="The Seven Moons of Maali Almeida",
        author="Shehan Karunatilaka",
        genre="Fantasy",
        description="A darkly comic fantasy about a photographer who wakes up dead.",
    ),
    Book(
        id="32",
        title="Klara and the Sun",
        author="Kazuo Ishiguro",
        genre="Science Fiction",
        description="A story told from the perspective of an artificial friend.",
    ),
    Book(
        id="33",
        title="The Thursday Murder Club",
        author="Richard Osman",
        genre="Mystery",
        description="Four unlikely friends meet weekly to investigate cold cases.",
    ),
    Book(
        id="34",
        title="Mexican Gothic",
        author="Silvia Moreno-Garcia",
        genre="Horror",
        description="A Victorian Gothic horror set in 1950s Mexico.",
    ),
    Book(
        id="35",
        title="The Sanatorium",
        author="Sarah Pearse",
        genre="Thriller",
        description="A detective investigates murders at a remote Swiss hotel.",
    ),
    Book(
        id="36",
        title="It Ends with Us",
        author="Colleen Hoover",
        genre="Romance",
        description="A powerful story about love, resilience, and difficult choices.",
    ),
    Book(
        id="37",
        title="Verity",
        author="Colleen Hoover",
        genre="Thriller",
        description="A psychological thriller about a writer and dark secrets.",
    ),
    Book(
        id="38",
        title="The Guest List",
        author="Lucy Foley",
        genre="Mystery",
        description="A wedding on a remote island turns deadly.",
    ),
    Book(
        id="39",
        title="The Midnight Girls",
        author="Alicia Jasinska",
        genre="Fantasy",
        description="A dark fairy tale inspired by Slavic folklore.",
    ),
    Book(
        id="40",
        title="Beach Read",
        author="Emily Henry",
        genre="Romance",
        description="Two rival writers challenge each other to write outside their genres.",
    ),
    Book(
        id="41",
        title="The Invisible Bridge",
        author="Julie Orringer",
        genre="Historical Fiction",
        description="A sweeping novel set during World War II.",
    ),
    Book(
        id="42",
        title="Anxious People",
        author="Fredrik Backman",
        genre="Fiction",
        description="A heartwarming story about a failed bank robbery.",
    ),
    Book(
        id="43",
        title="The Priory of the Orange Tree",
        author="Samantha Shannon",
        genre="Fantasy",
        description="An epic fantasy featuring dragons and ancient magic.",
    ),
    Book(
        id="44",
        title="Circe",
        author="Madeline Miller",
        genre="Fantasy",
        description="The story of the Greek goddess Circe and her transformation.",
    ),
    Book(
        id="45",
        title="The Poppy War",
        author="R.F. Kuang",
        genre="Fantasy",
        description="A grimdark military fantasy inspired by 20th-century China.",
    ),
    Book(
        id="46",
        title="The Atlas Six",
        author="Olivie Blake",
        genre="Fantasy",
        description="Six young magicians compete for a place in an ancient society.",
    ),
    Book(
        id="47",
        title="Project Hail Mary",
        author="Andy Weir",
        genre="Science Fiction",
        description="A lone astronaut must save humanity.",
    ),
    Book(
        id="48",
        title="The Invisible Life of Addie LaRue",
        author="V.E. Schwab",
        genre="Fantasy",
        description="A woman cursed to be forgotten by everyone she meets.",
    ),
    Book(
        id="49",
        title="The House in the Cerulean Sea",
        author="TJ Klune",
        genre="Fantasy",
        description="A heartwarming fantasy about found family and acceptance.",
    ),
    Book(
        id="50",
        title="The Starless Sea",
        author="Erin Morgenstern",
        genre="Fantasy",
        description="A magical tale of stories within stories.",
    ),
    Book(
        id="51",
        title="The Binding",
        author="Bridget Collins",
        genre="Fantasy",
        description="A world where books are used to erase painful memories.",
    ),
    Book(
        id="52",
        title="The Water Dancer",
        author="Ta-Nehisi Coates",
        genre="Historical Fiction",
        description="A powerful story of slavery and magical realism.",
    ),
    Book(
        id="53",
        title="The Vanishing Half",
        author="Brit Bennett",
        genre="Fiction",
        description="Twin sisters choose to live in different worlds.",
    ),
    Book(
        id="54",
        title="Such a Fun Age",
        author="Kiley Reid",
        genre="Fiction",
        description="A story about race, privilege, and good intentions.",
    ),
    Book(
        id="55",
        title="The Midnight Library",
        author="Matt Haig",
        genre="Fiction",
        description="A novel about life, death, and infinite possibilities.",
    ),
    Book(
        id="56",
        title="The Four Winds",
        author="Kristin Hannah",
        genre="Historical Fiction",
        description="A story of resilience during the Great Depression.",
    ),
    Book(
        id="57",
        title="The Nightingale",
        author="Kristin Hannah",
        genre="Historical Fiction",
        description="Two sisters in Nazi-occupied France.",
    ),
    Book(
        id="58",
        title="Eleanor Oliphant Is Completely Fine",
        author="Gail Honeyman",
        genre="Fiction",
        description="A quirky woman learns to connect with others.",
    ),
    Book(
        id="59",
        title="A Man Called Ove",
        author="Fredrik Backman",
        genre="Fiction",
        description="A grumpy man finds unexpected friendship.",
    ),
    Book(
        id="60",
        title="The Subtle Art of Not Giving a F*ck",
        author="Mark Manson",
        genre="Self-Help",
        description="A counterintuitive approach to living a good life.",
    ),
    Book(
        id="61",
        title="Sapiens",
        author="Yuval Noah Harari",
        genre="Non-Fiction",
        description="A brief history of humankind.",
    ),
    Book(
        id="62",
        title="The Alchemist",
        author="Paulo Coelho",
        genre="Fiction",
        description="A shepherd boy's journey to find treasure.",
    ),
    Book(
        id="63",
        title="Big Little Lies",
        author="Liane Moriarty",
        genre="Mystery",
        description="Secrets and lies in a seaside town.",
    ),
    Book(
        id="64",
        title="The Girl on the Train",
        author="Paula Hawkins",
        genre="Thriller",
        description="A psychological thriller about obsession and memory.",
    ),
    Book(
        id="65",
        title="Little Fires Everywhere",
        author="Celeste Ng",
        genre="Fiction",
        description="Secrets ignite in a picture-perfect suburb.",
    ),
    Book(
        id="66",
        title="The Hate U Give",
        author="Angie Thomas",
        genre="Young Adult",
        description="A powerful story about finding your voice.",
    ),
    Book(
        id="67",
        title="Children of Blood and Bone",
        author="Tomi Adeyemi",
        genre="Fantasy",
        description="A girl fights to restore magic to her oppressed people.",
    ),
    Book(
        id="68",
        title="The Cruel Prince",
        author="Holly Black",
        genre="Fantasy",
        description="A mortal girl navigates the treacherous High Court of Faerie.",
    ),
    Book(
        id="69",
        title="Red Queen",
        author="Victoria Aveyard",
        genre="Dystopian",
        description="In a world divided by blood, a girl discovers she has a deadly power.",
    ),
    Book(
        id="70",
        title="Six of Crows",
        author="Leigh Bardugo",
        genre="Fantasy",
        description="A crew of criminals attempts an impossible heist.",
    ),
)

_BY_ID: dict[str, Book] = {book.id: book for book in BOOKS}


def list_books() -> tuple[Book, ...]:
    return BOOKS


def get_book(book_id: str) -> Book | None:
    """Return the book with ``book_id`` or None when it is not catalogued."""
    return _BY_ID.get(str(book_id))


def has_book(book_id: str) -> bool:
    return str(book_id) in _BY_ID
