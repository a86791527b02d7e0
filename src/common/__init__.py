"""Shared logging and environment configuration."""
