"""
LLM module - Language model integration.

This module handles all Gemini interactions:
- Prompt construction
- API calls to the generateContent endpoint
- Response parsing
- Error mapping for upstream failures
"""
from src.llm.client import GeminiClient, build_payload, extract_answer, first_word

__all__ = [
    "GeminiClient",
    "build_payload",
    "extract_answer",
    "first_word",
]
