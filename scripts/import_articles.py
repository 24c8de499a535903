#!/usr/bin/env python3
"""
Article Import Script

Loads categories and articles from YAML files into MongoDB.

Expected file structure:
data/
  categories.yaml
  articles/
    article_001.yaml
    article_002.yaml
    ...

categories.yaml format:
categories:
  - key: technology
    label: Technology
  - key: sports
    label: Sports

Article YAML format:
title: "Sample Article"
summary: "One line summary"
language: "te"
category: "sports"        # optional, slug
categories: ["sports"]    # optional
source:
  name: "News Site"
  url: "https://example.com/article"
publishedAt: "2025-12-09 10:30"
status: "published"
content: |-
  word 1, word 2, ...
"""

import sys
import yaml
import click
from datetime import datetime
from pathlib import Path
from tqdm import tqdm
from typing import Dict, Any
from dotenv import load_dotenv
from news_portal.database.mongodb_client import MongoDBClient
from news_portal.utils.logger import setup_logger
from news_portal.models.article import parse_datetime
from news_portal.models.category import CategoryLookup
from news_portal.utils.config import CONFIG


load_dotenv('.env')
setup_logger()


class ArticleImporter:
  """Handle category and article import"""

  def __init__(self, link_categories: bool = True):
    """Initialize importer"""
    self.db = MongoDBClient()
    self.link_categories = link_categories
    self.lookup = CategoryLookup()

  def import_categories(self, categories_file: str) -> int:
    """Upsert categories from a YAML file"""
    path = Path(categories_file)
    if not path.exists():
      print(f"ℹ No categories file at {categories_file}")
      return 0

    with open(path, 'r', encoding='utf-8') as f:
      data = yaml.safe_load(f) or {}

    imported = 0
    for entry in data.get('categories') or []:
      if not entry.get('key'):
        continue
      self.db.upsert_category({
        "key": entry['key'],
        "label": entry.get('label') or entry['key'],
        "icon": entry.get('icon', 'newspaper'),
        "color": entry.get('color', '#6366f1'),
        "order": entry.get('order', 0)
      })
      imported += 1
    return imported

  def _link(self, value: Any) -> Any:
    """Replace a registered slug with its category identifier"""
    if not self.link_categories or not isinstance(value, str):
      return value
    category = self.lookup.by_key(value)
    return category.id if category else value

  def create_article_from_yaml(self, yaml_path: Path) -> Dict[str, Any]:
    """Build an article document from a YAML file"""
    with open(yaml_path, 'r', encoding='utf-8') as f:
      data = yaml.safe_load(f) or {}

    if not data.get('content') and not data.get('summary'):
      raise ValueError(f"Article {yaml_path.name} has no content, ignoring it")

    categories = data.get('categories') or []
    if not isinstance(categories, list):
      categories = [categories]

    source = data.get('source') or {}
    if isinstance(source, str):
      source = {"name": source, "url": data.get('url', '')}

    content = data.get('content', '')
    document = {
      "title": data.get('title', '<untitled>'),
      "slug": data.get('slug') or yaml_path.stem,
      "summary": data.get('summary', ''),
      "content": content,
      "language": data.get('language', 'en'),
      "categories": [self._link(c) for c in categories if c],
      "tags": data.get('tags') or [],
      "source": source,
      "status": data.get('status', 'published'),
      "publishedAt": parse_datetime(data.get('publishedAt')),
      "scrapedAt": datetime.now(),
      "viewCount": data.get('viewCount', 0),
      "wordCount": len(str(content).split())
    }
    if data.get('category'):
      document['category'] = self._link(data['category'])
    return document

  def import_batch(self, articles_dir: str) -> Dict[str, int]:
    """Import all articles from directory"""

    articles_path = Path(articles_dir)

    if not articles_path.exists():
      raise ValueError(f"Articles directory not found: {articles_dir}")

    self.lookup = CategoryLookup.from_records(self.db.get_categories())

    article_files = [
      f for f in sorted(articles_path.iterdir())
      if f.is_file() and f.suffix in ('.yaml', '.yml')
    ]

    stats = {
      "total": len(article_files),
      "imported": 0,
      "skipped": 0,
      "errors": 0
    }

    print(f"\nFound {stats['total']} article files in {articles_dir}")

    for article_file in tqdm(article_files, desc = "Importing articles"):
      try:
        document = self.create_article_from_yaml(article_file)
        if self.db.insert_article(document):
          stats['imported'] += 1
        else:
          stats['skipped'] += 1
      except yaml.YAMLError as e:
        print(f"\n✗ YAML Error in {article_file.name}: {e}")
        stats['errors'] += 1
      except ValueError as e:
        print(f"\n✗ Error processing {article_file.name}: {e}")
        stats['errors'] += 1

    return stats


@click.command()
@click.option('--articles-dir',
              default = CONFIG.get('import', {}).get('articles_path', 'data/articles'),
              help = 'Directory containing article YAML files')
@click.option('--categories-file',
              default = CONFIG.get('import', {}).get('categories_file', 'data/categories.yaml'),
              help = 'YAML file with category definitions')
@click.option('--link-categories/--keep-slugs', default = True,
        help = 'Store registered category slugs as category identifiers')
@click.option('--clear-db', is_flag = True,
        help = 'Clear articles before import (DANGEROUS!)')

def main(articles_dir, categories_file, link_categories, clear_db):
  """Import categories and articles from YAML files into MongoDB"""

  print("="*80)
  print("ARTICLE IMPORT")
  print("="*80)

  importer = ArticleImporter(link_categories = link_categories)
  importer.db.create_indexes()

  if clear_db:
    response = input("⚠ WARNING: This will delete all articles! Type 'YES' to confirm: ")
    if response == "YES":
      importer.db.clear_collection()
    else:
      print("Aborted.")
      return

  try:
    categories = importer.import_categories(categories_file)
    stats = importer.import_batch(articles_dir)

    print("\n" + "="*80)
    print("IMPORT COMPLETE")
    print("="*80)
    print(f"Categories: {categories}")
    print(f"Total files: {stats['total']}")
    print(f"✓ Imported: {stats['imported']}")
    print(f"⊘ Skipped: {stats['skipped']}")
    print(f"✗ Errors: {stats['errors']}")

  except Exception as e:
    print(f"\n✗ Fatal error: {e}")
    import traceback
    traceback.print_exc()
    sys.exit(1)


if __name__ == "__main__":
  main()
