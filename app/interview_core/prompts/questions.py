"""Question catalog, one pool per category. Loaded once at import."""

from __future__ import annotations
from types import MappingProxyType

from ..models import Category

_TECHNICAL = (
    "Explain the difference between var, let, and const in JavaScript.",
    "What is the virtual DOM in React and how does it work?",
    "Describe the concept of closures in JavaScript.",
    "What are React hooks and how do they improve component development?",
    "Explain the concept of promises in JavaScript and how they differ from callbacks.",
    "What is the difference between == and === in JavaScript?",
    "Describe the box model in CSS.",
    "What is event delegation in JavaScript?",
    "Explain how prototypal inheritance works in JavaScript.",
    "What is the purpose of the useEffect hook in React?",
)

_BEHAVIORAL = (
    "Tell me about a time when you had to work under pressure to meet a deadline.",
    "Describe a situation where you had to resolve a conflict within your team.",
    "How do you handle criticism of your work?",
    "Tell me about a time when you had to learn a new skill quickly.",
    "Describe a project where you demonstrated leadership skills.",
    "How do you prioritize tasks when you have multiple deadlines?",
    "Tell me about a time when you failed at something and what you learned from it.",
    "How do you stay motivated when working on challenging projects?",
    "Describe a situation where you had to adapt to a significant change at work.",
    "Tell me about a time when you went above and beyond what was required.",
)

_SYSTEM_DESIGN = (
    "How would you design a URL shortening service like bit.ly?",
    "Design a social media feed system that can handle millions of users.",
    "How would you design a distributed file storage system?",
    "Design a notification system for a mobile application.",
    "How would you design a real-time chat application?",
    "Design a recommendation system for an e-commerce website.",
    "How would you design a scalable API rate limiter?",
    "Design a system for a ride-sharing application like Uber.",
    "How would you design a distributed cache system?",
    "Design a system for processing and analyzing large amounts of data.",
)

QUESTIONS_BY_CATEGORY = MappingProxyType(
    {
        Category.TECHNICAL: _TECHNICAL,
        Category.BEHAVIORAL: _BEHAVIORAL,
        Category.SYSTEM_DESIGN: _SYSTEM_DESIGN,
    }
)
