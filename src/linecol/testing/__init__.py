from __future__ import annotations

from .corpus import generate_cases, generate_texts

__all__ = ["generate_cases", "generate_texts"]
