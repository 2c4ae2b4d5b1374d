"""
Wikidata Word Source

Fetches candidate lexemes from the Wikidata SPARQL endpoint and maps the
result bindings to CandidateWord objects.
"""

import unicodedata
from typing import Dict, List, Optional, Tuple

import requests

from ..config.game_settings import WORD_LENGTH_MAX, WORD_LENGTH_MIN
from ..config.languages import GENDER_LABELS, get_language
from ..models.round import CandidateWord, GrammaticalFeatures
from ..utils.game_logger import game_logger
from .query_builder import QueryBuilder


class WordSourceError(Exception):
    """Raised when candidates cannot be fetched or parsed."""


class WikidataClient:
    """
    Client for the Wikidata query service.

    Args:
        endpoint: SPARQL endpoint URL
        user_agent: User-Agent header, required by the Wikimedia API policy
        timeout: Request timeout in seconds
        session: Optional requests session to reuse connections
    """

    def __init__(self, endpoint: str, user_agent: str, timeout: float = 15,
                 session: Optional[requests.Session] = None):
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_candidates(self, language: str, word_kind: str = 'nouns', limit: int = 50,
                         min_length: int = WORD_LENGTH_MIN,
                         max_length: int = WORD_LENGTH_MAX) -> List[CandidateWord]:
        """
        Fetches guessable lexemes for a language.

        Args:
            language: Supported language code (e.g. 'en')
            word_kind: 'nouns', 'verbs' or 'adjectives'
            limit: Maximum number of rows requested
            min_length: Minimum lemma length
            max_length: Maximum lemma length

        Returns:
            List of candidates, possibly empty

        Raises:
            WordSourceError: On unsupported input, network failure or a
                malformed response
        """
        try:
            query = QueryBuilder.build_query(get_language(language), word_kind, limit, min_length, max_length)
        except ValueError as e:
            raise WordSourceError(str(e)) from e

        bindings = self._execute_query(query)
        candidates = self.parse_bindings(bindings, min_length, max_length)

        game_logger.logger.info(
            f"Fetched {len(candidates)} candidates ({len(bindings)} rows) for {language}/{word_kind}"
        )
        return candidates

    def _execute_query(self, query: str) -> List[Dict]:
        try:
            response = self.session.get(
                self.endpoint,
                params={'query': query, 'format': 'json'},
                headers={
                    'Accept': 'application/sparql-results+json',
                    'User-Agent': self.user_agent
                },
                timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            game_logger.logger.error(f"Wikidata request failed: {e}")
            raise WordSourceError(f"Wikidata request failed: {e}") from e
        except ValueError as e:
            raise WordSourceError(f"Invalid JSON from Wikidata: {e}") from e

        try:
            return data['results']['bindings']
        except (KeyError, TypeError) as e:
            raise WordSourceError("Unexpected response shape from Wikidata") from e

    @classmethod
    def parse_bindings(cls, bindings: List[Dict], min_length: int = WORD_LENGTH_MIN,
                       max_length: int = WORD_LENGTH_MAX) -> List[CandidateWord]:
        """
        Maps SPARQL result rows to candidates.

        Lemmas are lower-cased and NFC-normalized. Rows whose lemma is not
        purely alphabetic or falls outside the length bounds are dropped, as
        are repeated lemmas.
        """
        candidates = []
        seen = set()

        for row in bindings:
            lemma = _value(row, 'lemma')
            if not lemma:
                continue
            lemma = unicodedata.normalize('NFC', lemma.strip().lower())
            if not lemma.isalpha() or not min_length <= len(lemma) <= max_length:
                continue
            if lemma in seen:
                continue
            seen.add(lemma)

            candidates.append(CandidateWord(
                lemma=lemma,
                grammatical_features=cls._parse_features(row),
                description=_value(row, 'description'),
                image_ref=_value(row, 'image'),
                audio_ref=_value(row, 'audio'),
                translations=_split(_value(row, 'translations')),
                lexeme_id=_entity_id(_value(row, 'lexeme'))
            ))

        return candidates

    @staticmethod
    def _parse_features(row: Dict) -> Optional[GrammaticalFeatures]:
        gender_id = _entity_id(_value(row, 'gender'))
        plurals = _split(_value(row, 'plurals'))
        if gender_id is None and not plurals:
            return None
        gender = GENDER_LABELS.get(gender_id, gender_id) if gender_id else None
        return GrammaticalFeatures(gender=gender, plurals=plurals)


def _value(row: Dict, name: str) -> Optional[str]:
    cell = row.get(name)
    if not cell:
        return None
    value = cell.get('value')
    return value if value else None


def _split(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(part.strip() for part in value.split(',') if part.strip())


def _entity_id(uri: Optional[str]) -> Optional[str]:
    """'http://www.wikidata.org/entity/L1234' -> 'L1234'"""
    if not uri:
        return None
    return uri.rstrip('/').rsplit('/', 1)[-1]
