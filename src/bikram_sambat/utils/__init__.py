"""Shared utilities for the Bikram Sambat engine."""
