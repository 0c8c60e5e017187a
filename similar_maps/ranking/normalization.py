"""Song title/artist normalization for fuzzy comparison."""

import re

# Anything that is not a letter, digit or whitespace. \w also matches "_".
_SPECIAL_CHARS = re.compile(r"[^\w\s]|_")
_FEATURING = re.compile(r"\s+(feat|ft|featuring|prod|produced by)\s+.*", re.IGNORECASE | re.DOTALL)
_VERSION = re.compile(r"\s+(remix|edit|version|mix|vip|cover).*", re.IGNORECASE | re.DOTALL)


class TextNormalizer:
    """Builds the comparison key of a song from its title and artist.

    "Song (Remix)" by "Artist" and "song" by "artist" share the key
    "song artist": case, punctuation, featured artists and version
    qualifiers are all dropped before comparing.
    """

    def normalize(self, title: str | None, author: str | None) -> str:
        """Return the comparison key for a title/artist pair."""
        return f"{self.normalize_text(title)} {self.normalize_text(author)}"

    def normalize_text(self, text: str | None) -> str:
        """Normalize a single field."""
        if not text:
            return ""

        text = text.lower()
        text = _SPECIAL_CHARS.sub("", text)
        text = _FEATURING.sub("", text, count=1)
        text = _VERSION.sub("", text, count=1)
        return text.strip()
