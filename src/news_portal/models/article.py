from datetime import datetime
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field
from dateutil import parser as date_parser


def parse_datetime(value: Any) -> Optional[datetime]:
  """Accept datetimes or loosely formatted date strings"""
  if value is None or isinstance(value, datetime):
    return value
  try:
    return date_parser.parse(str(value), fuzzy = True)
  except (ValueError, OverflowError):
    return None


@dataclass
class ArticleSource:
  """Feed an article was scraped from"""
  name: str = ""
  url: str = ""

  @classmethod
  def from_value(cls, value: Any) -> 'ArticleSource':
    """Sources are stored as {name, url} or, in older documents, a bare name"""
    if isinstance(value, dict):
      return cls(name = value.get('name') or "", url = value.get('url') or "")
    if isinstance(value, str):
      return cls(name = value)
    return cls()


@dataclass
class Article:
  """News article as stored in the articles collection"""
  id: Optional[str]
  title: str = ""
  summary: str = ""
  content: str = ""
  language: Optional[str] = None
  # Slug, storage identifier, populated category or None
  category: Any = None
  categories: List[Any] = field(default_factory = list)
  source: ArticleSource = field(default_factory = ArticleSource)
  status: Optional[str] = None
  published_at: Optional[datetime] = None
  scraped_at: Optional[datetime] = None
  view_count: int = 0
  tags: List[str] = field(default_factory = list)
  slug: Optional[str] = None
  author: Optional[str] = None
  thumbnail: Optional[str] = None

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'Article':
    """Create Article from MongoDB document"""
    categories = data.get('categories') or []
    if not isinstance(categories, list):
      categories = [categories]

    return cls(
      id = str(data['_id']) if data.get('_id') is not None else None,
      title = data.get('title') or "",
      summary = data.get('summary') or "",
      content = data.get('content') or "",
      language = data.get('language'),
      category = data.get('category'),
      categories = categories,
      source = ArticleSource.from_value(data.get('source')),
      status = data.get('status'),
      published_at = parse_datetime(data.get('publishedAt')),
      scraped_at = parse_datetime(data.get('scrapedAt')),
      view_count = data.get('viewCount') or 0,
      tags = data.get('tags') or [],
      slug = data.get('slug'),
      author = data.get('author'),
      thumbnail = data.get('thumbnail')
    )

  def to_dict(self, display_category: Optional[str] = None) -> Dict[str, Any]:
    """Listing record with the resolved display category"""
    return {
      "id": self.id,
      "title": self.title,
      "summary": self.summary,
      "content": self.content,
      "thumbnail": self.thumbnail,
      "source": {
        "name": self.source.name or "Unknown",
        "url": self.source.url
      },
      "publishedAt": self.published_at,
      "scrapedAt": self.scraped_at,
      "language": self.language,
      "category": display_category,
      "categories": [str(c) for c in self.categories],
      "author": self.author,
      "tags": self.tags,
      "viewCount": self.view_count,
      "url": f"/article/{self.slug or self.id}"
    }
