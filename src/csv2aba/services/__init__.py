"""Conversion services wiring ingestion, encoders and storage."""
