"""Extraction and classification logic."""
