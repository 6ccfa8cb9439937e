#!/usr/bin/env python3
"""Convenience runner for the GPX track coordinate exporter.

Usage:
    python run.py GPX_DIR OUTPUT_DIR [--split-by-type]
"""
import logging
import sys

from track_coords.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    sys.exit(main())
