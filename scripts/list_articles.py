#!/usr/bin/env python3
"""
List articles for a language and category, the way the news pages do
"""

import json
import click
from dotenv import load_dotenv
from news_portal.utils.logger import setup_logger, logger
from news_portal.listing.engine import ArticleListingEngine
from news_portal.database.mongodb_client import DataStoreError


load_dotenv('.env')
setup_logger()

@click.command()
@click.option('--lang', 'language', default='english', help='Language code or name, "all" for every language')
@click.option('--category', default=None, help='Category slug or identifier')
@click.option('--page', default=1, type=int, help='Page number (1-based)')
@click.option('--limit', 'page_size', default=0, type=int, help='Page size (0 = configured default)')
@click.option('--search', default=None, help='Free text search in title, summary and content')
@click.option('--sort-by', default=None, help='Sort field')
@click.option('--sort-order', type=click.Choice(['asc', 'desc']), default=None)
@click.option('--json', 'as_json', is_flag=True, help='Print the page as JSON')
@click.option('--debug', is_flag=True, help='Enable debug logging')

def main(language, category, page, page_size, search, sort_by, sort_order, as_json, debug):
  """List a page of articles"""

  if debug:
    logger.setLevel("DEBUG")
    logger.debug("Debug mode enabled")

  engine = ArticleListingEngine()

  try:
    result = engine.list_articles(
      language,
      category,
      page = page,
      page_size = page_size,
      search = search,
      sort_by = sort_by,
      sort_order = sort_order
    )
  except DataStoreError as e:
    logger.error(f"✗ {e}")
    raise SystemExit(1)

  if as_json:
    print(json.dumps({
      "articles": result.items,
      "pagination": {
        "page": result.page,
        "limit": result.page_size,
        "total": result.total,
        "pages": result.pages,
        "approximate": result.approximate
      },
      "filters": result.filters,
      "strategy": result.strategy
    }, indent = 2, ensure_ascii = False, default = str))
    return

  print("="*80)
  print(f"Page {result.page}/{max(result.pages, 1)} - {result.total} articles ({result.strategy} filter)")
  if result.approximate:
    print("⚠ Total covers only the fetched candidates")
  print("="*80)
  for item in result.items:
    print(f"[{item['category']}] {item['title']}")
    print(f"  {item['source']['name']} - {item['publishedAt']} - {item['url']}")


if __name__ == "__main__":
  main()
