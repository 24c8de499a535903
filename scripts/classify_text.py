#!/usr/bin/env python3
"""
Classify a piece of text with the keyword scorer
"""

import click
from news_portal.classification.languages import resolve_language
from news_portal.classification.scorer import score_article


@click.command()
@click.option('--lang', 'language', default='english', help='Language code or name')
@click.option('--summary', default='', help='Article summary')
@click.option('--content', default='', help='Article body')
@click.argument('title')

def main(language, summary, content, title):
  """Print the detected category and its score"""
  result = score_article(title, summary, content, language)
  print(f"Language: {resolve_language(language)}")
  print(f"Category: {result.category}")
  print(f"Score:    {result.score}")


if __name__ == "__main__":
  main()
