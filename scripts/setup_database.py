#!/usr/bin/env python3
"""
Database Setup Script

Initialize MongoDB indexes and verify connection
"""

import click
from dotenv import load_dotenv
from news_portal.database.mongodb_client import MongoDBClient
from news_portal.utils.logger import setup_logger


load_dotenv('.env')
setup_logger()

@click.command()
def main():
  """Setup and verify database"""

  print("="*80)
  print("DATABASE SETUP")
  print("="*80)

  try:
    # Initialize client
    print("\nConnecting to MongoDB...")
    db = MongoDBClient()
    created = db.create_indexes()
    print(f"  Indexes created: {created}")

    # Get statistics
    stats = db.get_statistics()

    print("\n✓ Database connection successful!")
    print("\nCurrent Statistics:")
    print(f"  Total articles: {stats['total_articles']}")
    print(f"  Categories: {stats['total_categories']}")
    print(f"  Languages: {', '.join(stats['languages']) or '-'}")

    if stats['date_range']['oldest']:
      print(f"  Date range: {stats['date_range']['oldest']} to {stats['date_range']['newest']}")
    else:
      print("  Date range: No articles yet")

    print("\n✓ Database is ready for use!")

  except Exception as e:
    print(f"\n✗ Error: {e}")
    print("\nTroubleshooting:")
    print("  1. Ensure MongoDB is running (mongod)")
    print("  2. Check connection string in config/config.yaml")
    print("  3. Verify network connectivity")
    raise SystemExit(1)


if __name__ == "__main__":
  main()
