"""
Assistant services: the query-understanding and ranking engine.

Usage:
    from assistant.services import SearchEngine

    engine = SearchEngine()
    result = engine.search("harga paket umroh vip")
"""

from .engine import SearchEngine, SearchResult

__all__ = ["SearchEngine", "SearchResult"]
