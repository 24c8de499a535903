from typing import Dict, Iterable, Optional, Any
from dataclasses import dataclass


@dataclass(frozen = True)
class Category:
  """Registered category record"""
  id: str
  key: str
  label: str
  icon: str = "newspaper"
  color: str = "#6366f1"
  order: int = 0

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'Category':
    """Create Category from MongoDB document"""
    key = str(data['key']).strip().lower()
    return cls(
      id = str(data['_id']),
      key = key,
      label = data.get('label') or key,
      icon = data.get('icon') or "newspaper",
      color = data.get('color') or "#6366f1",
      order = data.get('order') or 0
    )


class CategoryLookup:
  """
  Read-only identifier -> category and key -> category maps.

  Built once per request batch from the categories collection and never
  written back.
  """

  def __init__(self, categories: Iterable[Category] = ()):
    self._by_id: Dict[str, Category] = {}
    self._by_key: Dict[str, Category] = {}
    for category in categories:
      self._by_id[category.id.lower()] = category
      self._by_key.setdefault(category.key, category)

  @classmethod
  def from_records(cls, records: Iterable[Dict[str, Any]]) -> 'CategoryLookup':
    """Build from raw category documents, skipping ones without a key"""
    return cls(Category.from_dict(r) for r in records if r.get('key') and r.get('_id') is not None)

  def by_id(self, identifier: Any) -> Optional[Category]:
    if identifier is None:
      return None
    return self._by_id.get(str(identifier).strip().lower())

  def by_key(self, key: Optional[str]) -> Optional[Category]:
    if not key:
      return None
    return self._by_key.get(key.strip().lower())

  def __len__(self) -> int:
    return len(self._by_id)

  def __iter__(self):
    return iter(self._by_id.values())
