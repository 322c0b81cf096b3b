#!/usr/bin/env python3
"""
Seed the e-commerce database with fake data.

Run with: python main.py seed --users 10 --products 50
"""
import sys

from dbseeder.cli import main

if __name__ == "__main__":
    sys.exit(main())
