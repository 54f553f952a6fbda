"""Tabular data ingestion and acquisition."""
