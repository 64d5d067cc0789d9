"""Core truncation and printing logic."""
