"""Detection services: dictionaries, tokenizing, matching and aggregation."""

from .chunk_analyzer import ChunkAnalyzer
from .dictionary_provider import DictionaryProvider
from .keyword_matcher import KeywordMatcher
from .session_aggregator import SessionAggregator
from .tokenizer import context_window, normalize, tokenize

__all__ = [
    "ChunkAnalyzer",
    "DictionaryProvider",
    "KeywordMatcher",
    "SessionAggregator",
    "context_window",
    "normalize",
    "tokenize",
]
