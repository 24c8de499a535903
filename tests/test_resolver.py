from bson import ObjectId

from news_portal.classification.references import is_opaque_reference
from news_portal.classification.resolver import CategoryResolver, source_override
from news_portal.classification.scorer import CategoryScorer
from news_portal.classification.keywords import build_dictionary
from news_portal.models.article import Article, ArticleSource
from news_portal.models.category import Category, CategoryLookup

TECH_ID = "65a1f0c2e4b0a1b2c3d4e5f6"
STALE_ID = "65a1f0c2e4b0a1b2c3d4ffff"

CRICKET_TEXT = "Cricket match: the team won the tournament final, player of the match named"


def make_lookup():
  return CategoryLookup([Category(id = TECH_ID, key = "technology", label = "Technology")])


def make_article(**fields):
  fields.setdefault("id", str(ObjectId()))
  fields.setdefault("language", "english")
  return Article(**fields)


def test_opaque_reference_shape():
  assert is_opaque_reference(TECH_ID)
  assert is_opaque_reference(TECH_ID.upper())
  assert is_opaque_reference(ObjectId())
  assert not is_opaque_reference("politics")
  assert not is_opaque_reference(TECH_ID[:-1])
  assert not is_opaque_reference("z" * 24)
  assert not is_opaque_reference(None)


def test_source_override_table():
  assert source_override("ABP Live Telugu - Crime") == "crime"
  assert source_override("ABP Live Telugu - Business News") == "business"
  assert source_override("OK Telugu Andhra Pradesh") == "andhra-pradesh"
  assert source_override("ABP Live Telugu") is None
  assert source_override(None) is None


def test_source_override_beats_explicit_category():
  article = make_article(
    title = "Election results announced",
    category = "politics",
    source = ArticleSource(name = "ABP Live Telugu - Crime")
  )
  assert CategoryResolver(make_lookup()).resolve_display_category(article) == "crime"


def test_explicit_category_beats_categories_and_content():
  article = make_article(title = CRICKET_TEXT, category = "Politics", categories = ["business"])
  assert CategoryResolver().resolve_display_category(article) == "politics"


def test_categories_head_used_when_category_missing():
  article = make_article(title = CRICKET_TEXT, category = "", categories = ["Health", "crime"])
  assert CategoryResolver().resolve_display_category(article) == "health"


def test_identifier_resolves_through_lookup_not_content():
  article = make_article(title = CRICKET_TEXT, category = TECH_ID)
  assert CategoryResolver(make_lookup()).resolve_display_category(article) == "technology"


def test_identifier_in_categories_and_object_id_values():
  resolver = CategoryResolver(make_lookup())
  assert resolver.resolve_display_category(make_article(title = CRICKET_TEXT, categories = [TECH_ID])) == "technology"
  assert resolver.resolve_display_category(make_article(title = CRICKET_TEXT, category = ObjectId(TECH_ID))) == "technology"


def test_populated_category_document():
  article = make_article(title = CRICKET_TEXT, category = {"_id": ObjectId(TECH_ID), "key": "technology"})
  assert CategoryResolver().resolve_display_category(article) == "technology"


def test_stale_identifier_falls_through_to_content():
  article = make_article(title = CRICKET_TEXT, category = STALE_ID, categories = [STALE_ID])
  assert CategoryResolver(make_lookup()).resolve_display_category(article) == "sports"


def test_no_stored_category_uses_content():
  article = make_article(title = "Police arrest suspect after robbery")
  assert CategoryResolver().resolve_display_category(article) == "crime"


def test_nothing_matches_gives_general():
  article = make_article(title = "Lorem ipsum dolor")
  assert CategoryResolver().resolve_display_category(article) == "general"


def test_fallback_language_used_when_article_has_none():
  article = make_article(title = "క్రికెట్ మ్యాచ్ విజయం", language = None)
  resolver = CategoryResolver()
  assert resolver.resolve_display_category(article, fallback_language = "te") == "sports"
  # without a language the scorer defaults to English keywords only
  assert resolver.resolve_display_category(article) == "general"


def test_requested_category_does_not_change_the_result():
  article = make_article(title = CRICKET_TEXT)
  resolver = CategoryResolver()
  assert resolver.resolve_display_category(article, "politics") == resolver.resolve_display_category(article)


def test_injected_scorer_is_used():
  scorer = CategoryScorer(build_dictionary({"weather": ("monsoon",)}))
  article = make_article(title = "Monsoon arrives early")
  assert CategoryResolver(scorer = scorer).resolve_display_category(article) == "weather"
