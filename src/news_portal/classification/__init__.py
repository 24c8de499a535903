from .normalizer import normalize_text
from .languages import resolve_language, language_aliases, SUPPORTED_LANGUAGES
from .keywords import KEYWORD_DICTIONARY, build_dictionary
from .scorer import CategoryScorer, ClassificationResult, score_article, GENERAL_CATEGORY
from .references import is_opaque_reference
from .resolver import CategoryResolver, source_override

__all__ = [
  'normalize_text',
  'resolve_language',
  'language_aliases',
  'SUPPORTED_LANGUAGES',
  'KEYWORD_DICTIONARY',
  'build_dictionary',
  'CategoryScorer',
  'ClassificationResult',
  'score_article',
  'GENERAL_CATEGORY',
  'is_opaque_reference',
  'CategoryResolver',
  'source_override',
]
