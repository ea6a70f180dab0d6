"""Core fetching and extraction components."""
