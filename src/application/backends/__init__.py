"""Insight backend implementations."""

from .language_model import LanguageModelBackend
from .rule_based import RuleBasedBackend

__all__ = ["LanguageModelBackend", "RuleBasedBackend"]
