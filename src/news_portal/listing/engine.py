"""
Article listing with category filtering and pagination.

Categories backed by a registered identifier are filtered by MongoDB.
Free-text categories cannot be expressed as a query, so a bounded
superset of candidates is fetched, classified in memory, filtered and
then paginated. Totals on that path only cover the fetched superset.
"""

import math
import re
import pymongo
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional
from news_portal.classification.languages import language_aliases
from news_portal.classification.references import is_opaque_reference
from news_portal.classification.resolver import CategoryResolver
from news_portal.classification.scorer import CategoryScorer
from news_portal.database.mongodb_client import MongoDBClient, DataStoreError, SortSpec
from news_portal.models.article import Article
from news_portal.models.category import CategoryLookup
from news_portal.utils.logger import logger
from news_portal.utils.config import CONFIG

STRATEGY_DATABASE = "database"
STRATEGY_SMART = "smart"

ALL_CATEGORIES = "all"

# Requested slugs that mean the same display category
CATEGORY_ALIASES = {
  "uncategorized": "general",
}

SORTABLE_FIELDS = ("publishedAt", "scrapedAt", "createdAt", "viewCount", "title")


@dataclass
class ArticlePage:
  """One page of listed articles"""
  items: List[Dict[str, Any]]
  total: int
  page: int
  page_size: int
  strategy: str = STRATEGY_DATABASE
  # True when the smart filter superset came back full, so total may be low.
  # A store holding exactly that many candidates is flagged too.
  approximate: bool = False
  filters: Dict[str, Any] = field(default_factory = dict)

  @property
  def pages(self) -> int:
    return math.ceil(self.total / self.page_size) if self.page_size else 0


class ArticleListingEngine:
  """List articles by language and category"""

  def __init__(
      self,
      db: Optional[MongoDBClient] = None,
      scorer: Optional[CategoryScorer] = None,
      listing_config: Optional[Dict[str, Any]] = None):
    self.db = db or MongoDBClient()
    self.scorer = scorer
    config = listing_config or CONFIG['listing']
    self.default_page_size = int(config.get('default_page_size', 12))
    self.superset_multiplier = int(config.get('superset_multiplier', 10))
    self.superset_cap = int(config.get('superset_cap', 500))
    self.visible_statuses = list(config.get('visible_statuses') or [])
    self.default_sort_by = config.get('default_sort_by', 'publishedAt')
    self.default_sort_order = config.get('default_sort_order', 'desc')

  def load_lookup(self) -> CategoryLookup:
    """Category table for one request batch"""
    return CategoryLookup.from_records(self.db.get_categories())

  def base_filter(self, language: Optional[str], search: Optional[str] = None) -> Dict[str, Any]:
    """Status, language and search conditions shared by both paths"""
    query: Dict[str, Any] = {}
    if self.visible_statuses:
      query['status'] = {"$in": self.visible_statuses}

    if language and language.lower() != ALL_CATEGORIES:
      query['language'] = {"$in": language_aliases(language)}

    if search and search.strip():
      pattern = re.escape(search.strip())
      query['$and'] = [{"$or": [
        {"title": {"$regex": pattern, "$options": "i"}},
        {"summary": {"$regex": pattern, "$options": "i"}},
        {"content": {"$regex": pattern, "$options": "i"}}
      ]}]
    return query

  def sort_spec(self, sort_by: Optional[str], sort_order: Optional[str]) -> SortSpec:
    field_name = sort_by if sort_by in SORTABLE_FIELDS else self.default_sort_by
    order = (sort_order or self.default_sort_order).lower()
    direction = pymongo.ASCENDING if order == "asc" else pymongo.DESCENDING
    return [(field_name, direction), ("_id", direction)]

  def superset_limit(self, page_size: int) -> int:
    return min(page_size * self.superset_multiplier, self.superset_cap)

  def list_articles(
      self,
      language: Optional[str],
      category: Optional[str] = None,
      page: int = 1,
      page_size: int = 0,
      search: Optional[str] = None,
      sort_by: Optional[str] = None,
      sort_order: Optional[str] = None) -> ArticlePage:
    """
    One page of articles for a language and optional category.

    Raises DataStoreError when MongoDB cannot be queried; an empty page
    always means that nothing matched.
    """
    page = max(1, int(page or 1))
    page_size = int(page_size or 0)
    if page_size <= 0:
      page_size = self.default_page_size

    requested = (category or "").strip().lower()
    if requested == ALL_CATEGORIES:
      requested = ""

    query = self.base_filter(language, search)
    sort = self.sort_spec(sort_by, sort_order)
    filters = {
      "language": language,
      "category": category,
      "search": search,
      "sortBy": sort[0][0],
      "sortOrder": "asc" if sort[0][1] == pymongo.ASCENDING else "desc"
    }

    try:
      lookup = self.load_lookup()
      resolver = CategoryResolver(lookup, self.scorer)

      reference = None
      registered = None
      if requested:
        if is_opaque_reference(requested):
          reference = requested
          registered = lookup.by_id(requested)
        else:
          registered = lookup.by_key(requested)
          if registered is not None:
            reference = registered.id

      if requested and reference is None:
        result = self._smart_filter(query, sort, requested, page, page_size, resolver, language)
      else:
        if reference is not None:
          key = registered.key if registered is not None else None
          query.setdefault('$and', []).append(self.db.category_filter(reference, key))
        result = self._database_filter(query, sort, page, page_size, resolver, language)
    except pymongo.errors.PyMongoError as e:
      logger.error(f"✗ Article listing failed (language={language}, category={category}): {e}")
      raise DataStoreError(f"Could not list articles: {e}") from e

    result.filters = filters
    return result

  def _database_filter(
      self,
      query: Dict[str, Any],
      sort: SortSpec,
      page: int,
      page_size: int,
      resolver: CategoryResolver,
      language: Optional[str]) -> ArticlePage:
    """Filter, sort, paginate and count in MongoDB"""
    docs = self.db.find_page(query, sort, skip = (page - 1) * page_size, limit = page_size)
    total = self.db.count_by_filter(query)

    items = []
    for doc in docs:
      article = Article.from_dict(doc)
      items.append(article.to_dict(resolver.resolve_display_category(article, fallback_language = language)))

    return ArticlePage(items, total, page, page_size, STRATEGY_DATABASE)

  def _smart_filter(
      self,
      query: Dict[str, Any],
      sort: SortSpec,
      requested: str,
      page: int,
      page_size: int,
      resolver: CategoryResolver,
      language: Optional[str]) -> ArticlePage:
    """
    Fetch a bounded superset, classify in memory, then paginate.

    A full superset marks the page approximate even when the store holds
    no further candidates.
    """
    wanted = CATEGORY_ALIASES.get(requested, requested)
    limit = self.superset_limit(page_size)
    logger.info(f"ℹ Smart filtering for category '{requested}' (superset limit {limit})")

    candidates = self.db.find_page(query, sort, limit = limit)

    matched = []
    for doc in candidates:
      article = Article.from_dict(doc)
      display = resolver.resolve_display_category(article, requested, fallback_language = language)
      if CATEGORY_ALIASES.get(display, display) == wanted:
        matched.append(article.to_dict(display))

    total = len(matched)
    start = (page - 1) * page_size
    approximate = len(candidates) >= limit
    logger.debug(f"Smart filtering: {len(candidates)} -> {total} articles")
    if approximate:
      logger.debug(f"Superset cap {limit} reached, total for '{requested}' is a lower bound")

    return ArticlePage(
      matched[start:start + page_size],
      total,
      page,
      page_size,
      STRATEGY_SMART,
      approximate = approximate
    )

  def category_counts(self, language: Optional[str] = None) -> List[Dict[str, Any]]:
    """Article counts per registered category over `category` and `categories`"""
    query = self.base_filter(language)
    try:
      lookup = self.load_lookup()
      array_stats = self.db.aggregate([
        {"$match": query},
        {"$unwind": "$categories"},
        {"$group": {"_id": "$categories", "count": {"$sum": 1}, "languages": {"$addToSet": "$language"}}}
      ])
      single_stats = self.db.aggregate([
        {"$match": query},
        {"$group": {"_id": "$category", "count": {"$sum": 1}, "languages": {"$addToSet": "$language"}}}
      ])
    except pymongo.errors.PyMongoError as e:
      logger.error(f"✗ Category statistics failed: {e}")
      raise DataStoreError(f"Could not count categories: {e}") from e

    counts: Dict[str, Dict[str, Any]] = {}
    for stat in array_stats + single_stats:
      registered = lookup.by_id(stat['_id']) if stat.get('_id') is not None else None
      if registered is None:
        continue
      entry = counts.setdefault(registered.id, {
        "id": registered.id,
        "key": registered.key,
        "label": registered.label,
        "count": 0,
        "languages": set()
      })
      entry['count'] += stat['count']
      entry['languages'].update(l for l in stat.get('languages', []) if l)

    result = []
    for entry in counts.values():
      entry['languages'] = sorted(entry['languages'])
      result.append(entry)
    result.sort(key = lambda e: (-e['count'], e['key']))
    return result
