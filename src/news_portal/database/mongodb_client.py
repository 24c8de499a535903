import re
import pymongo
from bson import ObjectId
from datetime import datetime, date
from typing import Dict, List, Any, Optional, Tuple
from news_portal.classification.references import is_opaque_reference
from news_portal.utils.logger import logger
from news_portal.utils.config import CONFIG

SortSpec = List[Tuple[str, int]]


class DataStoreError(Exception):
  """The document store could not be queried"""


class MongoDBClient:
  """MongoDB client for article and category storage"""

  def __init__(self, client: Optional[pymongo.MongoClient] = None, db_config: Optional[Dict[str, Any]] = None):
    """Initialize MongoDB client, optionally on top of an existing connection"""
    db_config = db_config or CONFIG['database']
    self.db_config = db_config

    # Connect to MongoDB (connection is lazy, the first query may still fail)
    if client is None:
      client = pymongo.MongoClient(
        db_config['mongodb_uri'],
        serverSelectionTimeoutMS = db_config.get('server_selection_timeout_ms', 5000)
      )
    self.client = client
    self.db = self.client[db_config['database_name']]
    self.collection = self.db[db_config['collection_name']]
    self.categories = self.db[db_config.get('categories_collection', 'categories')]

  def create_indexes(self):
    """Create necessary indexes for efficient querying, if needed"""
    specs = [
      (self.collection, "language", {}),
      (self.collection, "status", {}),
      (self.collection, "publishedAt", {}),
      (self.collection, "category", {}),
      (self.collection, "categories", {}),
      (self.collection, "slug", {"unique": True, "sparse": True}),
      (self.categories, "key", {"unique": True}),
    ]

    created = 0
    for collection, field, options in specs:
      # Convert SON -> dict -> sorted tuple (hashable)
      existing_keys = {
        tuple(sorted(dict(idx["key"]).items()))
        for idx in collection.list_indexes()
      }
      if ((field, 1),) not in existing_keys:
        collection.create_index(field, **options)
        created += 1

    if created > 0:
      logger.info(f"✓ Created {created} indexes")
    return created

  def mongo_clean(self, doc):
    """Convert non-BSON types to serializable"""
    if isinstance(doc, dict):
      return {k: self.mongo_clean(v) for k, v in doc.items()}
    elif isinstance(doc, list):
      return [self.mongo_clean(x) for x in doc]
    elif isinstance(doc, date) and not isinstance(doc, datetime):
      return datetime.combine(doc, datetime.min.time())
    return doc

  def insert_article(self, article_data: Dict[str, Any]) -> Optional[str]:
    """Insert a single article, None if it already exists"""
    try:
      result = self.collection.insert_one(self.mongo_clean(article_data))
    except pymongo.errors.DuplicateKeyError:
      logger.info(f"ℹ Article already exists (ignored): {article_data.get('slug')}")
      return None
    except pymongo.errors.PyMongoError as e:
      logger.error(f"✗ MongoDB error: {e}")
      raise DataStoreError(str(e)) from e
    return str(result.inserted_id)

  def upsert_category(self, category_data: Dict[str, Any]) -> str:
    """Insert or update a category by key"""
    key = str(category_data['key']).strip().lower()
    data = {**category_data, "key": key}
    data.pop('_id', None)
    try:
      result = self.categories.find_one_and_update(
        {"key": key},
        {"$set": data},
        upsert = True,
        return_document = pymongo.ReturnDocument.AFTER
      )
    except pymongo.errors.PyMongoError as e:
      logger.error(f"✗ MongoDB error: {e}")
      raise DataStoreError(str(e)) from e
    return str(result['_id'])

  def get_categories(self) -> List[Dict[str, Any]]:
    """All registered categories"""
    return list(self.categories.find({}))

  def category_filter(self, reference: Any, key: Optional[str] = None) -> Dict[str, Any]:
    """
    Match a category in either the scalar or the array field, stored as
    its identifier (string or ObjectId) or, when `key` is given, as its
    readable slug in any letter case
    """
    refs: List[Any] = [str(reference)]
    if is_opaque_reference(reference):
      refs.append(ObjectId(str(reference)))
    conditions: List[Dict[str, Any]] = [
      {"category": {"$in": refs}},
      {"categories": {"$in": refs}}
    ]
    if key:
      pattern = f"^{re.escape(key.strip())}$"
      conditions.append({"category": {"$regex": pattern, "$options": "i"}})
      conditions.append({"categories": {"$regex": pattern, "$options": "i"}})
    return {"$or": conditions}

  def find_page(
      self,
      filter_dict: Dict[str, Any],
      sort: Optional[SortSpec] = None,
      skip: int = 0,
      limit: int = 0) -> List[Dict[str, Any]]:
    """Find articles by filter, sorted and paginated by the server"""
    cursor = self.collection.find(filter_dict)
    if sort:
      cursor = cursor.sort(sort)
    if skip > 0:
      cursor = cursor.skip(skip)
    if limit > 0:
      cursor = cursor.limit(limit)
    return list(cursor)

  def find_by_filter(
      self,
      filter_dict: Dict[str, Any],
      projection: Optional[Dict[str, int]] = None,
      limit: int = 0) -> List[Dict[str, Any]]:
    """Find articles by filter"""
    cursor = self.collection.find(filter_dict, projection)
    if limit > 0:
      cursor = cursor.limit(limit)
    return list(cursor)

  def count_by_filter(self, filter_dict: Dict[str, Any]) -> int:
    """Count articles matching filter"""
    return self.collection.count_documents(filter_dict)

  def aggregate(self, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Run an aggregation pipeline on the articles collection"""
    return list(self.collection.aggregate(pipeline))

  def clear_collection(self):
    """Clear all articles (use with caution!)"""
    self.collection.delete_many({})
    logger.info("⚠ All articles deleted from the collection")

  def get_statistics(self) -> Dict[str, Any]:
    """Get collection statistics"""
    total_articles = self.collection.count_documents({})
    languages = self.collection.distinct("language")

    oldest = self.collection.find_one(
      sort=[("publishedAt", pymongo.ASCENDING)]
    )
    newest = self.collection.find_one(
      sort=[("publishedAt", pymongo.DESCENDING)]
    )

    return {
      "total_articles": total_articles,
      "total_categories": self.categories.count_documents({}),
      "languages": sorted(str(l) for l in languages if l),
      "date_range": {
        "oldest": oldest.get('publishedAt') if oldest else None,
        "newest": newest.get('publishedAt') if newest else None
      }
    }
