"""Askbase - an in-memory question and answer knowledge base."""
