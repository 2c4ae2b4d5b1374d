"""
Word Source Package

Builds Wikidata queries and turns their results into candidate words.
"""

from .query_builder import QueryBuilder
from .wikidata_client import WikidataClient, WordSourceError

__all__ = ['QueryBuilder', 'WikidataClient', 'WordSourceError']
