import re
from typing import Dict, List, Optional, Pattern

DEFAULT_LANGUAGE = "english"

# ISO 639-1 code -> canonical language key
LANGUAGE_CODES: Dict[str, str] = {
  'en': 'english',
  'hi': 'hindi',
  'te': 'telugu',
  'ta': 'tamil',
  'bn': 'bengali',
  'gu': 'gujarati',
  'mr': 'marathi',
  'ml': 'malayalam',
}

# Canonical language key -> pattern a keyword must match to belong to it.
# Hindi and Marathi share Devanagari, so they see each other's keywords.
SCRIPT_RANGES: Dict[str, Pattern] = {
  'english': re.compile(r"^[a-z]+$", re.IGNORECASE),
  'hindi': re.compile(r"[\u0900-\u097f]"),
  'marathi': re.compile(r"[\u0900-\u097f]"),
  'telugu': re.compile(r"[\u0c00-\u0c7f]"),
  'tamil': re.compile(r"[\u0b80-\u0bff]"),
  'bengali': re.compile(r"[\u0980-\u09ff]"),
  'gujarati': re.compile(r"[\u0a80-\u0aff]"),
  'malayalam': re.compile(r"[\u0d00-\u0d7f]"),
}

SUPPORTED_LANGUAGES = tuple(SCRIPT_RANGES)

_NAME_TO_CODE = {name: code for code, name in LANGUAGE_CODES.items()}


def resolve_language(code: Optional[str]) -> str:
  """Map an ISO code or English language name to a canonical language key"""
  if not code:
    return DEFAULT_LANGUAGE

  value = str(code).strip().lower()
  if value in LANGUAGE_CODES:
    return LANGUAGE_CODES[value]
  if value in SCRIPT_RANGES:
    return value
  return DEFAULT_LANGUAGE


def language_aliases(value: Optional[str]) -> List[str]:
  """
  All spellings a language may be stored under ("te", "telugu", "Telugu").
  Unknown values only match themselves.
  """
  if not value:
    return []

  raw = str(value).strip()
  key = raw.lower()
  if key in LANGUAGE_CODES:
    name = LANGUAGE_CODES[key]
  elif key in _NAME_TO_CODE:
    name = key
  else:
    return [raw]

  aliases = [_NAME_TO_CODE[name], name, name.capitalize()]
  if raw not in aliases:
    aliases.append(raw)
  return aliases


def keyword_in_language(keyword: str, language: str) -> bool:
  """Whether a keyword belongs to the script of a canonical language"""
  pattern = SCRIPT_RANGES.get(language)
  if pattern is None:
    return True
  return bool(pattern.search(keyword))
