"""Lexical classifier: prompt text to style tags."""

from restyle.classifier.keywords import KEYWORDS
from restyle.classifier.scanner import KeywordMatch, classify, normalize, scan, tokenize

__all__ = ["KEYWORDS", "KeywordMatch", "classify", "normalize", "scan", "tokenize"]
