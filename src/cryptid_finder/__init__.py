"""Deduction and hint engine for the hidden-creature hex board game."""
