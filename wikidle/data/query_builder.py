"""
Query Builder

Renders SPARQL templates for a language and word kind.
"""

from typing import Dict

from ..config.game_settings import WORD_LENGTH_MAX, WORD_LENGTH_MIN
from ..config.languages import WORD_KINDS
from .queries import CANDIDATES_QUERY


class QueryBuilder:
    """Fills {{PLACEHOLDER}} slots in the query templates."""

    @staticmethod
    def build_query(language: Dict, word_kind: str = 'nouns', limit: int = 50,
                    min_length: int = WORD_LENGTH_MIN, max_length: int = WORD_LENGTH_MAX) -> str:
        """
        Builds the candidate lexeme query.

        Args:
            language: Language entry with 'code' and 'qid' keys
            word_kind: One of the configured word kinds
            limit: Maximum number of rows
            min_length: Minimum lemma length
            max_length: Maximum lemma length

        Returns:
            str: SPARQL query text

        Raises:
            ValueError: If the word kind has no lexical category
        """
        category = WORD_KINDS.get(word_kind.lower())
        if category is None:
            raise ValueError(f"No query template found for word type: {word_kind}")

        replacements = {
            'LANGUAGE_QID': language['qid'],
            'LANGUAGE_CODE': language['code'],
            'LEXICAL_CATEGORY': category,
            'LIMIT': int(limit),
            'MIN_LENGTH': int(min_length),
            'MAX_LENGTH': int(max_length),
        }

        query = CANDIDATES_QUERY
        for name, value in replacements.items():
            query = query.replace('{{' + name + '}}', str(value))
        return query
