#!/usr/bin/env python3
"""
Provision an API key for the link API.

Keys are created out of band; the HTTP API only validates them.

Usage:
    python create_api_key.py owner@example.com
    python create_api_key.py owner@example.com --key my-fixed-key
"""

import argparse
import secrets
import sys

from shortlink_app.common.logging_config import setup_logging
from shortlink_app.config import settings
from shortlink_app.database.connection import Base, SessionLocal, engine
from shortlink_app.errors import StoreError
from shortlink_app.storage.factory import LinkStoreBackend, LinkStoreFactory


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create an API key record")
    parser.add_argument("owner_email", help="Email of the key owner")
    parser.add_argument("--key", help="Key string to register (random when omitted)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    
    args = parser.parse_args(argv)
    
    logger = setup_logging(level="DEBUG" if args.verbose else settings.log_level)
    
    if LinkStoreBackend(settings.storage_backend) != LinkStoreBackend.SQLALCHEMY:
        logger.error("API keys can only be provisioned for the sqlalchemy storage backend")
        return 1
    
    Base.metadata.create_all(bind=engine)
    key = args.key or secrets.token_urlsafe(24)
    
    db = SessionLocal()
    try:
        store = LinkStoreFactory.create(LinkStoreBackend.SQLALCHEMY, db=db)
        record = store.add_api_key(key, args.owner_email)
    except StoreError as e:
        logger.error(f"Could not create API key: {e}")
        return 1
    finally:
        db.close()
    
    logger.info(f"Created API key for {record.owner_email}")
    print(record.api_key)
    return 0


if __name__ == "__main__":
    sys.exit(main())
