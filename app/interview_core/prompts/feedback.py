"""Feedback templates: per-category summary, strengths, improvements, notes."""

from __future__ import annotations

from ..models import Category

GENERAL_FEEDBACK = {
    Category.TECHNICAL: (
        "You demonstrated good technical knowledge in several areas. "
        "Your explanations were generally clear and structured."
    ),
    Category.BEHAVIORAL: (
        "Your responses showed good self-awareness and ability to reflect on past "
        "experiences. You provided structured answers using the STAR method."
    ),
    Category.SYSTEM_DESIGN: (
        "You demonstrated a solid approach to system design problems. "
        "Your solutions considered scalability and reliability aspects."
    ),
}

STRENGTHS = {
    Category.TECHNICAL: (
        "Strong understanding of core concepts",
        "Good problem-solving approach",
        "Clear communication of technical ideas",
    ),
    Category.BEHAVIORAL: (
        "Good storytelling and situation framing",
        "Clear explanation of your specific actions",
        "Effective communication of outcomes",
    ),
    Category.SYSTEM_DESIGN: (
        "Good understanding of system architecture principles",
        "Methodical approach to breaking down problems",
        "Consideration of performance constraints",
    ),
}

IMPROVEMENTS = {
    Category.TECHNICAL: (
        "Consider providing more real-world examples",
        "Deepen knowledge in advanced topics",
        "Practice explaining complex concepts more concisely",
    ),
    Category.BEHAVIORAL: (
        "Quantify your achievements more specifically",
        "Include more reflection on what you learned",
        "Prepare more diverse examples for common questions",
    ),
    Category.SYSTEM_DESIGN: (
        "Deepen knowledge of distributed systems concepts",
        "Consider trade-offs more explicitly",
        "Practice drawing system diagrams more clearly",
    ),
}

PENALTY_CLAUSE = (
    " However, some questions were not fully addressed, "
    "which affected the overall assessment."
)

ANSWER_ALL_ITEM = "Ensure all questions are answered completely"

NOT_ANSWERED_NOTE = (
    "This question was not answered. "
    "Make sure to address all questions in an interview."
)

DETAIL_POOL = (
    "Good answer that covers the main points. Consider adding more specific examples.",
    "Well-structured response. You could elaborate more on the technical details.",
    "Clear explanation. Try to be more concise while maintaining clarity.",
    "Solid answer. Consider the interviewer's perspective and what they're looking to assess.",
    "Good start, but the answer could be more comprehensive. Think about edge cases.",
)
