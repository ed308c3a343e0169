"""
Verse Service - short encouraging Bible verses printed at the bottom of labels

Verses come from the bolls.life API. Any network or payload problem is logged
and replaced with a fixed fallback so label printing never fails on it.
"""
import logging
import random
import re
from collections import deque
from dataclasses import dataclass

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

RECENT_HISTORY_SIZE = 10
MAX_REPEAT_ATTEMPTS = 5
MAX_FIT_ATTEMPTS = 3
RANDOM_VERSE_PROBABILITY = 0.1
DEFAULT_MAX_LENGTH = 150

BOOK_NAMES = {
    1: 'Genesis', 2: 'Exodus', 3: 'Leviticus', 4: 'Numbers', 5: 'Deuteronomy',
    6: 'Joshua', 7: 'Judges', 8: 'Ruth', 9: '1 Samuel', 10: '2 Samuel',
    11: '1 Kings', 12: '2 Kings', 13: '1 Chronicles', 14: '2 Chronicles', 15: 'Ezra',
    16: 'Nehemiah', 17: 'Esther', 18: 'Job', 19: 'Psalm', 20: 'Proverbs',
    21: 'Ecclesiastes', 22: 'Song of Solomon', 23: 'Isaiah', 24: 'Jeremiah', 25: 'Lamentations',
    26: 'Ezekiel', 27: 'Daniel', 28: 'Hosea', 29: 'Joel', 30: 'Amos',
    31: 'Obadiah', 32: 'Jonah', 33: 'Micah', 34: 'Nahum', 35: 'Habakkuk',
    36: 'Zephaniah', 37: 'Haggai', 38: 'Zechariah', 39: 'Malachi', 40: 'Matthew',
    41: 'Mark', 42: 'Luke', 43: 'John', 44: 'Acts', 45: 'Romans',
    46: '1 Corinthians', 47: '2 Corinthians', 48: 'Galatians', 49: 'Ephesians', 50: 'Philippians',
    51: 'Colossians', 52: '1 Thessalonians', 53: '2 Thessalonians', 54: '1 Timothy', 55: '2 Timothy',
    56: 'Titus', 57: 'Philemon', 58: 'Hebrews', 59: 'James', 60: '1 Peter',
    61: '2 Peter', 62: '1 John', 63: '2 John', 64: '3 John', 65: 'Jude',
    66: 'Revelation',
}

# (book, chapter, verse)
ENCOURAGING_VERSES = (
    (19, 23, 1), (19, 46, 1), (19, 118, 24), (20, 3, 5),
    (23, 40, 31), (24, 29, 11),
    (40, 5, 16), (40, 11, 28),
    (43, 3, 16), (43, 14, 27), (43, 16, 33),
    (45, 8, 28), (46, 10, 13), (47, 5, 17), (49, 2, 10),
    (50, 4, 6), (50, 4, 13), (50, 4, 19), (51, 3, 17),
    (55, 1, 7), (58, 13, 5), (59, 1, 17), (60, 5, 7),
)

_TAG_RE = re.compile(r'<[^>]*>')


@dataclass(frozen=True)
class Verse:
    text: str
    reference: str

    @property
    def formatted(self):
        return f"{self.text} - {self.reference}"


UNAVAILABLE_FALLBACK = Verse(
    "The Lord bless you and keep you; The Lord make His face shine upon you, And be gracious to you.",
    "Numbers 6:24-25",
)
SHORT_FALLBACK = Verse(
    "God is our refuge and strength, A very present help in trouble.",
    "Psalm 46:1",
)


def format_reference(book, chapter, verse):
    return f"{BOOK_NAMES.get(book, f'Book {book}')} {chapter}:{verse}"


def clean_verse_text(text):
    return ' '.join(_TAG_RE.sub('', text or '').split())


class VerseService:
    """Picks and fetches verses, avoiding the most recent picks process-wide."""

    _recent = deque(maxlen=RECENT_HISTORY_SIZE)

    @classmethod
    def reset_history(cls):
        cls._recent.clear()

    @classmethod
    def pick_curated_reference(cls):
        candidate = random.choice(ENCOURAGING_VERSES)
        for _ in range(MAX_REPEAT_ATTEMPTS - 1):
            if candidate not in cls._recent:
                break
            candidate = random.choice(ENCOURAGING_VERSES)
        return candidate

    @staticmethod
    def _get_json(path):
        url = f"{settings.VERSE_API_BASE_URL.rstrip('/')}/{path}"
        response = requests.get(
            url,
            headers={'Accept': 'application/json'},
            timeout=settings.VERSE_API_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()

    @classmethod
    def fetch_verse(cls):
        """
        Fetch one verse: usually from the curated list, occasionally a random one.

        Returns:
            Verse; UNAVAILABLE_FALLBACK when the API cannot be reached or returns junk
        """
        translation = settings.VERSE_TRANSLATION
        try:
            if random.random() < RANDOM_VERSE_PROBABILITY:
                data = cls._get_json(f"get-random-verse/{translation}/")
                reference = (int(data['book']), int(data['chapter']), int(data['verse']))
            else:
                reference = cls.pick_curated_reference()
                data = cls._get_json("get-verse/{}/{}/{}/{}/".format(translation, *reference))
            text = clean_verse_text(data['text'])
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.warning("Verse lookup failed, using fallback: %s", exc)
            return UNAVAILABLE_FALLBACK

        if not text:
            logger.warning("Verse API returned empty text for %s", reference)
            return UNAVAILABLE_FALLBACK

        cls._recent.append(reference)
        return Verse(text, format_reference(*reference))

    @classmethod
    def get_verse_for_label(cls, max_length=DEFAULT_MAX_LENGTH):
        """Formatted verse no longer than max_length characters."""
        for _ in range(MAX_FIT_ATTEMPTS):
            verse = cls.fetch_verse()
            if len(verse.formatted) <= max_length:
                return verse.formatted

        formatted = SHORT_FALLBACK.formatted
        if len(formatted) > max_length:
            formatted = formatted[:max(max_length - 3, 0)].rstrip() + '...'
        return formatted
