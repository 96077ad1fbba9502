"""Data file ingestion.

This package locates and decodes the persisted JSON data files.
It turns raw JSON objects into typed, keyed source datasets.
"""
