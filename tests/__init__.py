"""Bikram Sambat calendar engine test suite."""
