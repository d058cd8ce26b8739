"""Lexichain: board difficulty benchmarks for a word-chain puzzle game."""
