"""Vocab Practice backend."""
