"""Shared helpers for Eve."""
