import pytest

from news_portal.classification.languages import (
  SCRIPT_RANGES,
  SUPPORTED_LANGUAGES,
  keyword_in_language,
  language_aliases,
  resolve_language,
)


@pytest.mark.parametrize("value, expected", [
  ("te", "telugu"),
  ("TE", "telugu"),
  ("Telugu", "telugu"),
  (" hindi ", "hindi"),
  ("mr", "marathi"),
  ("ml", "malayalam"),
  ("en", "english"),
  (None, "english"),
  ("", "english"),
  ("klingon", "english"),
])
def test_resolve_language(value, expected):
  assert resolve_language(value) == expected


def test_every_supported_language_has_a_script_range():
  assert set(SUPPORTED_LANGUAGES) == set(SCRIPT_RANGES)
  assert len(SUPPORTED_LANGUAGES) == 8


def test_aliases_cover_code_and_names():
  assert language_aliases("te") == ["te", "telugu", "Telugu"]
  assert language_aliases("Telugu") == ["te", "telugu", "Telugu"]
  assert language_aliases("punjabi") == ["punjabi"]
  assert language_aliases(None) == []


def test_keyword_script_membership():
  assert keyword_in_language("cricket", "english")
  assert not keyword_in_language("box office", "english")
  assert keyword_in_language("క్రికెట్", "telugu")
  assert not keyword_in_language("క్రికెట్", "hindi")
  # Hindi and Marathi share Devanagari
  assert keyword_in_language("खेळ", "hindi")
