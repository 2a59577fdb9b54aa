"""
Source code root package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors, and validators
- services/  : Arithmetic and request dispatch
- llm/       : Gemini integration
- models/    : Pydantic models for request/response schemas
"""
