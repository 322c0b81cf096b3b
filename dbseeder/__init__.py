"""Seed an e-commerce database with synthetic data."""

__version__ = "1.0.0"
