"""Question-selection hints built on hypothetical answers."""

from .engine import QuestionHint, QuietTileHint, best_question, hypothetical_answer, quietest_tile

__all__ = ["QuestionHint", "QuietTileHint", "best_question", "hypothetical_answer", "quietest_tile"]
