from datetime import datetime, timedelta

import mongomock
import pytest
from bson import ObjectId

from news_portal.database.mongodb_client import MongoDBClient
from news_portal.listing.engine import ArticleListingEngine

DB_CONFIG = {
  'mongodb_uri': 'mongodb://localhost:27017',
  'database_name': 'news_portal_test',
  'collection_name': 'articles',
  'categories_collection': 'categories',
}

LISTING_CONFIG = {
  'default_page_size': 12,
  'superset_multiplier': 10,
  'superset_cap': 500,
  'visible_statuses': ['scraped', 'processed', 'published'],
  'default_sort_by': 'publishedAt',
  'default_sort_order': 'desc',
}

BASE_TIME = datetime(2025, 12, 9, 10, 0)


@pytest.fixture
def db():
  return MongoDBClient(client = mongomock.MongoClient(), db_config = DB_CONFIG)


@pytest.fixture
def engine(db):
  return ArticleListingEngine(db = db, listing_config = LISTING_CONFIG)


@pytest.fixture
def add_category(db):
  def _add(key, label = None):
    category_id = ObjectId()
    db.categories.insert_one({"_id": category_id, "key": key, "label": label or key.title()})
    return category_id
  return _add


@pytest.fixture
def add_article(db):
  counter = {"n": 0}

  def _add(title, language = "english", minutes = None, **fields):
    counter["n"] += 1
    offset = counter["n"] if minutes is None else minutes
    doc = {
      "_id": ObjectId(),
      "title": title,
      "summary": "",
      "content": "",
      "language": language,
      "status": "published",
      "slug": f"article-{counter['n']}",
      "source": {"name": "Test Wire", "url": "https://example.com"},
      "publishedAt": BASE_TIME + timedelta(minutes = offset),
    }
    doc.update(fields)
    db.collection.insert_one(doc)
    return str(doc["_id"])
  return _add
