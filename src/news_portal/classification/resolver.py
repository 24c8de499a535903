"""
Display category resolution.

An article's stored category fields may hold a readable slug, a storage
identifier, a populated category or nothing at all. The resolver turns
them into a single display category using a fixed precedence:

  1. source trust override (topically pure feeds)
  2. explicit readable `category`
  3. readable head of `categories`
  4. identifier in `category` or `categories[0]`, via the lookup table
  5. content scoring
"""

from typing import Any, Optional, Tuple
from news_portal.classification.references import is_opaque_reference
from news_portal.classification.scorer import CategoryScorer, GENERAL_CATEGORY, default_scorer
from news_portal.models.article import Article
from news_portal.models.category import CategoryLookup

# (source name fragment, category). Checked in order, first match wins.
SOURCE_OVERRIDES: Tuple[Tuple[str, str], ...] = (
  ("ABP Live Telugu - Crime", "crime"),
  ("ABP Live Telugu - Business", "business"),
  ("OK Telugu Andhra Pradesh", "andhra-pradesh"),
)


def source_override(source_name: Optional[str]) -> Optional[str]:
  """Fixed category for feeds whose editorial classification is trusted"""
  if not source_name:
    return None
  for fragment, category in SOURCE_OVERRIDES:
    if fragment in source_name:
      return category
  return None


def _readable_label(value: Any) -> Optional[str]:
  """Slug from a stored value, or None when it is missing or an identifier"""
  if isinstance(value, dict):
    # Populated category document
    value = value.get('key')
  if not isinstance(value, str) or is_opaque_reference(value):
    return None
  label = value.strip().lower()
  return label or None


def _reference(value: Any) -> Any:
  if isinstance(value, dict):
    value = value.get('_id')
  return value if is_opaque_reference(value) else None


class CategoryResolver:
  """Resolve the display category of stored articles"""

  def __init__(
      self,
      lookup: Optional[CategoryLookup] = None,
      scorer: Optional[CategoryScorer] = None):
    self.lookup = lookup if lookup is not None else CategoryLookup()
    self.scorer = scorer if scorer is not None else default_scorer

  def resolve_display_category(
      self,
      article: Article,
      requested_category: Optional[str] = None,
      fallback_language: Optional[str] = None) -> str:
    """
    Display category for an article, never empty.

    `requested_category` does not influence the outcome; the same article
    resolves the same way whatever listing it appears in.
    `fallback_language` is used for scoring when the article has no language.
    """
    override = source_override(article.source.name)
    if override:
      return override

    label = _readable_label(article.category)
    if label:
      return label

    head = article.categories[0] if article.categories else None
    label = _readable_label(head)
    if label:
      return label

    for value in (article.category, head):
      reference = _reference(value)
      if reference is None:
        continue
      category = self.lookup.by_id(reference)
      if category is not None:
        return category.key

    result = self.scorer.score(
      article.title,
      article.summary,
      article.content,
      article.language or fallback_language
    )
    return result.category or GENERAL_CATEGORY
