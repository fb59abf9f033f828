"""Shared test factories and fakes."""
