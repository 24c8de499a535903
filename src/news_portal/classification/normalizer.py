import re
import unicodedata
from typing import Optional

_ZERO_WIDTH_RE = re.compile(r"[\u200b-\u200d\ufeff]")
_WHITESPACE_RE = re.compile(r"\s+")


def _is_punct_or_symbol(char: str) -> bool:
  """True for Unicode general categories P* and S*"""
  return unicodedata.category(char)[0] in ('P', 'S')


def normalize_text(text: Optional[str]) -> str:
  """
  Normalize text for keyword matching.

  - Drop zero-width space/joiner/non-joiner and BOM
  - Replace punctuation and symbols with a space (letters, digits and
    combining marks of every script are kept)
  - Lowercase, collapse whitespace and trim

  Never fails: None or empty input gives an empty string.
  """
  if not text:
    return ""

  text = _ZERO_WIDTH_RE.sub("", str(text))
  text = "".join(" " if _is_punct_or_symbol(c) else c for c in text)
  text = text.lower()
  return _WHITESPACE_RE.sub(" ", text).strip()
