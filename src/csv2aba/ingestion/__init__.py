"""Readers that turn source tables into named rows."""
