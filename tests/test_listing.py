import pymongo
import pytest
from bson import ObjectId

from news_portal.classification.resolver import CategoryResolver
from news_portal.database.mongodb_client import DataStoreError
from news_portal.listing.engine import ArticleListingEngine, STRATEGY_DATABASE, STRATEGY_SMART
from news_portal.models.article import Article
from news_portal.models.category import CategoryLookup

from conftest import LISTING_CONFIG

TELUGU_CRICKET = "క్రికెట్ మ్యాచ్\u200cలో విజయం"


def ids(page):
  return [item["id"] for item in page.items]


@pytest.fixture
def scenario(add_category, add_article):
  tech_id = add_category("technology", "Technology")
  politics = add_article("Government announces new election schedule", language = "english")
  cricket = add_article(TELUGU_CRICKET, language = "telugu")
  chip = add_article("New chip launched", language = "english", category = str(tech_id))
  return {"politics": politics, "cricket": cricket, "chip": chip, "tech_id": tech_id}


def test_free_text_category_uses_smart_filter(engine, scenario):
  page = engine.list_articles("english", "politics")
  assert page.strategy == STRATEGY_SMART
  assert ids(page) == [scenario["politics"]]
  assert page.total == 1
  assert page.items[0]["category"] == "politics"


def test_telugu_sports(engine, scenario):
  page = engine.list_articles("telugu", "sports")
  assert page.strategy == STRATEGY_SMART
  assert ids(page) == [scenario["cricket"]]
  assert page.items[0]["category"] == "sports"


def test_registered_category_uses_database_filter(engine, scenario):
  page = engine.list_articles("english", "technology")
  assert page.strategy == STRATEGY_DATABASE
  assert ids(page) == [scenario["chip"]]
  assert page.items[0]["category"] == "technology"


def test_registered_category_matches_stored_slug(engine, scenario, add_article):
  by_slug = add_article("Quarterly results", category = "Technology")
  in_array = add_article("Budget phones", categories = ["technology"])
  add_article("Lab report", category = "biotechnology")
  page = engine.list_articles("english", "technology")
  assert page.strategy == STRATEGY_DATABASE
  assert set(ids(page)) == {scenario["chip"], by_slug, in_array}
  assert {i["category"] for i in page.items} == {"technology"}
  assert engine.list_articles("all", str(scenario["tech_id"])).total == 3


def test_identifier_category_uses_database_filter(engine, scenario):
  page = engine.list_articles("all", str(scenario["tech_id"]))
  assert page.strategy == STRATEGY_DATABASE
  assert ids(page) == [scenario["chip"]]


def test_object_id_stored_in_categories_array(engine, add_category, add_article):
  sports_id = add_category("sports")
  stored = add_article("Weekend fixtures", categories = [sports_id])
  add_article("Government announces new election schedule")
  page = engine.list_articles("english", "sports")
  assert page.strategy == STRATEGY_DATABASE
  assert ids(page) == [stored]
  assert page.items[0]["category"] == "sports"


def test_no_category_lists_language_newest_first(engine, scenario):
  page = engine.list_articles("en", None)
  assert page.strategy == STRATEGY_DATABASE
  assert ids(page) == [scenario["chip"], scenario["politics"]]
  assert [i["category"] for i in page.items] == ["technology", "politics"]
  assert engine.list_articles("english", "all").total == 2


def test_language_all_lists_everything(engine, scenario):
  assert engine.list_articles("all").total == 3
  assert engine.list_articles(None).total == 3


def test_hidden_statuses_are_excluded(engine, add_article):
  add_article("Government announces new election schedule", status = "rejected")
  visible = add_article("Minister opens parliament session")
  assert ids(engine.list_articles("english")) == [visible]
  assert ids(engine.list_articles("english", "politics")) == [visible]


def test_database_pagination(engine, add_article):
  for n in range(5):
    add_article(f"Story {n}")
  page = engine.list_articles("english", page = 2, page_size = 2)
  assert page.total == 5
  assert page.pages == 3
  assert [i["title"] for i in page.items] == ["Story 2", "Story 1"]


def test_smart_filter_paginates_filtered_list(engine, add_article):
  for n in range(5):
    add_article(f"Election campaign update {n}")
  add_article("Lorem ipsum dolor")
  page = engine.list_articles("english", "politics", page = 2, page_size = 2)
  assert page.strategy == STRATEGY_SMART
  assert page.total == 5
  assert page.pages == 3
  assert [i["title"] for i in page.items] == ["Election campaign update 2", "Election campaign update 1"]
  assert not page.approximate


def test_smart_filter_total_is_capped(db, add_article):
  config = {**LISTING_CONFIG, "superset_multiplier": 2, "superset_cap": 3}
  engine = ArticleListingEngine(db = db, listing_config = config)
  for n in range(5):
    add_article(f"Election campaign update {n}")
  page = engine.list_articles("english", "politics", page_size = 1)
  assert engine.superset_limit(1) == 2
  assert page.total == 2
  assert page.approximate


def test_full_superset_is_flagged_even_when_exact(db, add_article):
  config = {**LISTING_CONFIG, "superset_multiplier": 2, "superset_cap": 500}
  engine = ArticleListingEngine(db = db, listing_config = config)
  add_article("Election campaign update")
  assert not engine.list_articles("english", "politics", page_size = 1).approximate
  add_article("Minister opens parliament session")
  page = engine.list_articles("english", "politics", page_size = 1)
  assert page.total == 2
  assert page.approximate


def test_superset_limit_uses_smaller_bound(engine):
  assert engine.superset_limit(12) == 120
  assert engine.superset_limit(100) == 500


def test_non_positive_page_size_uses_default(engine, add_article):
  add_article("Story")
  assert engine.list_articles("english", page_size = 0).page_size == 12
  assert engine.list_articles("english", page_size = -3).page_size == 12
  assert engine.list_articles("english", page = 0).page == 1


def test_source_override_in_smart_filter(engine, add_article):
  trusted = add_article(
    "Government announces new election schedule",
    language = "telugu",
    source = {"name": "ABP Live Telugu - Crime", "url": ""}
  )
  assert ids(engine.list_articles("te", "crime")) == [trusted]
  assert engine.list_articles("te", "politics").total == 0


def test_uncategorized_is_general(engine, add_article):
  plain = add_article("Lorem ipsum dolor")
  add_article("Government announces new election schedule")
  assert ids(engine.list_articles("english", "uncategorized")) == [plain]
  assert ids(engine.list_articles("english", "General")) == [plain]


def test_search_is_combined_with_category(engine, add_article):
  add_article("Government announces new election schedule")
  wanted = add_article("Minister resigns (again)?")
  add_article("Police arrest minister's aide")
  page = engine.list_articles("english", "politics", search = "resigns (again)")
  assert ids(page) == [wanted]
  assert engine.list_articles("english", search = "MINISTER").total == 2


def test_sort_order_and_unknown_sort_field(engine, add_article):
  first = add_article("Story a")
  second = add_article("Story b")
  assert ids(engine.list_articles("english", sort_order = "asc")) == [first, second]
  page = engine.list_articles("english", sort_by = "$where", sort_order = "desc")
  assert ids(page) == [second, first]
  assert page.filters["sortBy"] == "publishedAt"


def test_smart_filter_matches_database_filter(db, engine, add_category, add_article):
  category_ids = {key: add_category(key) for key in ("politics", "sports", "crime")}
  layout = [
    ("politics", "category"), ("sports", "categories"), ("crime", "category"),
    ("sports", "category"), ("politics", "categories"), ("sports", "categories"),
  ]
  for n, (key, field) in enumerate(layout):
    value = str(category_ids[key]) if field == "category" else [category_ids[key]]
    # content deliberately points at a different category
    add_article(f"Police arrest suspect {n}", **{field: value})

  lookup = CategoryLookup.from_records(db.get_categories())
  resolver = CategoryResolver(lookup)
  everything = [Article.from_dict(doc) for doc in db.find_by_filter({})]

  for key in category_ids:
    page = engine.list_articles(None, key, page_size = 100)
    assert page.strategy == STRATEGY_DATABASE
    brute_force = {a.id for a in everything if resolver.resolve_display_category(a) == key}
    assert set(ids(page)) == brute_force


def test_unreachable_store_raises(engine, monkeypatch):
  def boom():
    raise pymongo.errors.ServerSelectionTimeoutError("no servers")
  monkeypatch.setattr(engine.db, "get_categories", boom)
  with pytest.raises(DataStoreError):
    engine.list_articles("english", "politics")
  with pytest.raises(DataStoreError):
    engine.list_articles("english")


def test_category_counts(engine, scenario, add_article):
  add_article("Chip shortage", categories = [scenario["tech_id"]], language = "hindi")
  add_article("Unregistered", category = str(ObjectId()))
  counts = engine.category_counts()
  assert len(counts) == 1
  assert counts[0]["key"] == "technology"
  assert counts[0]["count"] == 2
  assert counts[0]["languages"] == ["english", "hindi"]
  assert engine.category_counts("hi")[0]["count"] == 1


@pytest.mark.parametrize("method, category", [
  ("find_page", None),
  ("find_page", "technology"),
  ("find_page", "politics"),
  ("count_by_filter", None),
  ("count_by_filter", "technology"),
])
def test_query_failure_after_lookup_raises(engine, scenario, monkeypatch, method, category):
  def boom(*args, **kwargs):
    raise pymongo.errors.AutoReconnect("connection reset")
  monkeypatch.setattr(engine.db, method, boom)
  with pytest.raises(DataStoreError):
    engine.list_articles("english", category)
