#!/usr/bin/env python3
"""Fetch the legal/tax feeds and write data/news.json."""

import sys

from legal_news.cli import main

if __name__ == "__main__":
    sys.exit(main())
