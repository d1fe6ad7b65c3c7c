"""Configuration, exceptions, type aliases and protocols."""
