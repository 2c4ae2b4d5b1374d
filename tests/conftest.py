import os
import tempfile

# Keep test logs out of the working tree; must happen before wikidle is imported.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wikidle-logs-'))

import pytest

from wikidle import create_app
from wikidle.config import TestingConfig
from wikidle.data import WordSourceError
from wikidle.models import CandidateWord, GrammaticalFeatures
from wikidle.services import game_service as game_service_module
from wikidle.services import settings_service as settings_service_module
from wikidle.services.game_service import initialize_game_service
from wikidle.services.settings_service import initialize_settings_service


def make_word(lemma="crane", **kwargs) -> CandidateWord:
    defaults = {
        "grammatical_features": GrammaticalFeatures(gender="feminine", plurals=("cranes",)),
        "description": "a large long-necked bird",
        "image_ref": "http://commons.wikimedia.org/wiki/Special:FilePath/Crane.jpg",
        "audio_ref": None,
        "translations": ("grue",),
        "lexeme_id": "L1001",
    }
    defaults.update(kwargs)
    return CandidateWord(lemma=lemma, **defaults)


class FakeWordSource:
    """Word source returning a fixed candidate list, or raising when error is set."""

    def __init__(self, candidates=None, error=None):
        self.candidates = list(candidates) if candidates is not None else [make_word()]
        self.error = error
        self.calls = []

    def fetch_candidates(self, language, word_kind='nouns', limit=50, min_length=3, max_length=12):
        self.calls.append({
            'language': language,
            'word_kind': word_kind,
            'limit': limit,
            'min_length': min_length,
            'max_length': max_length,
        })
        if self.error:
            raise WordSourceError(self.error)
        return list(self.candidates)


class _UpdateResult:
    def __init__(self, matched_count):
        self.matched_count = matched_count


class FakeCollection:
    """The subset of pymongo's Collection used by SettingsService."""

    def __init__(self):
        self.docs = []
        self.indexes = []

    def create_index(self, key, **kwargs):
        self.indexes.append((key, kwargs))
        return key

    def _match(self, doc, query):
        return all(doc.get(k) == v for k, v in query.items())

    def find_one(self, query, projection=None):
        for doc in self.docs:
            if self._match(doc, query):
                return doc
        return None

    def update_one(self, query, update, upsert=False):
        doc = self.find_one(query)
        matched = 1 if doc else 0
        if doc is None:
            if not upsert:
                return _UpdateResult(0)
            doc = dict(query)
            self.docs.append(doc)

        for dotted, value in update.get('$set', {}).items():
            target, key = self._walk(doc, dotted)
            target[key] = value
        for dotted, value in update.get('$inc', {}).items():
            target, key = self._walk(doc, dotted)
            target[key] = target.get(key, 0) + value
        return _UpdateResult(matched)

    @staticmethod
    def _walk(doc, dotted):
        parts = dotted.split('.')
        target = doc
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        return target, parts[-1]


@pytest.fixture
def word_source():
    return FakeWordSource()


@pytest.fixture
def players_collection():
    return FakeCollection()


@pytest.fixture
def settings_service(players_collection):
    service = initialize_settings_service(players_collection=players_collection)
    yield service
    settings_service_module._settings_service = None


@pytest.fixture
def game_service(word_source, settings_service):
    service = initialize_game_service(word_source, settings_service)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service):
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
