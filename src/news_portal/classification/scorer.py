from dataclasses import dataclass
from typing import Dict, List, Optional
from news_portal.classification.keywords import KEYWORD_DICTIONARY, KeywordDictionary
from news_portal.classification.languages import SCRIPT_RANGES, keyword_in_language, resolve_language
from news_portal.classification.normalizer import normalize_text

GENERAL_CATEGORY = "general"

# Keywords shorter than this never participate in scoring
MIN_KEYWORD_LENGTH = 3

# Fraction of a keyword kept as its stem for partial matches
STEM_RATIO = 0.7


@dataclass(frozen = True)
class ClassificationResult:
  """Best category guess for a block of text"""
  category: str
  score: int


def keyword_weight(keyword: str) -> int:
  """Longer, more specific keywords weigh more"""
  return max(1, len(keyword) // 4)


def keyword_stem(keyword: str) -> str:
  """Leading part of a keyword, tolerant to inflected suffixes"""
  return keyword[:max(MIN_KEYWORD_LENGTH, int(len(keyword) * STEM_RATIO))]


def keyword_matches(padded_text: str, keyword: str) -> bool:
  """
  Whole-word match first, then substring match on the keyword stem.
  `padded_text` is normalized text wrapped in single spaces.
  """
  if len(keyword) < MIN_KEYWORD_LENGTH:
    return False
  if f" {keyword} " in padded_text:
    return True
  stem = keyword_stem(keyword)
  return len(stem) >= MIN_KEYWORD_LENGTH and stem in padded_text


class CategoryScorer:
  """Weighted keyword scorer over a read-only keyword dictionary"""

  def __init__(self, dictionary: Optional[KeywordDictionary] = None):
    self.dictionary = KEYWORD_DICTIONARY if dictionary is None else dictionary
    self._slices: Dict[str, Dict[str, List[str]]] = {}

  def keywords_for(self, language: str) -> Dict[str, List[str]]:
    """Per-category keywords in the script of a canonical language"""
    if language not in self._slices:
      if language in SCRIPT_RANGES:
        self._slices[language] = {
          category: [k for k in keywords if keyword_in_language(k, language)]
          for category, keywords in self.dictionary.items()
        }
      else:
        # Unknown script: keep every keyword
        self._slices[language] = {
          category: list(keywords) for category, keywords in self.dictionary.items()
        }
    return self._slices[language]

  def score_text(self, text: str, language: Optional[str] = None) -> ClassificationResult:
    """Score an arbitrary block of text"""
    padded = f" {normalize_text(text)} "
    canonical = resolve_language(language)

    best = GENERAL_CATEGORY
    best_score = 0
    for category, keywords in self.keywords_for(canonical).items():
      score = sum(keyword_weight(k) for k in keywords if keyword_matches(padded, k))
      # Strictly greater: ties keep the earlier declared category
      if score > best_score:
        best = category
        best_score = score

    if best_score == 0:
      return ClassificationResult(GENERAL_CATEGORY, 0)
    return ClassificationResult(best, best_score)

  def score(
      self,
      title: Optional[str],
      summary: Optional[str],
      content: Optional[str],
      language: Optional[str] = None) -> ClassificationResult:
    """Score an article's title, summary and content together"""
    text = f"{title or ''} {summary or ''} {content or ''}"
    return self.score_text(text, language)


# Process-wide scorer over the built-in dictionary
default_scorer = CategoryScorer()


def score_article(
    title: Optional[str],
    summary: Optional[str],
    content: Optional[str],
    language: Optional[str] = None) -> ClassificationResult:
  """Score with the built-in dictionary"""
  return default_scorer.score(title, summary, content, language)
