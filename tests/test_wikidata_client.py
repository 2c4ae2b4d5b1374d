from unittest.mock import MagicMock

import pytest
import requests

from wikidle.data import WikidataClient, WordSourceError

ENDPOINT = "https://query.wikidata.org/sparql"


def binding(lemma, **extra):
    row = {'lemma': {'type': 'literal', 'value': lemma}}
    for name, value in extra.items():
        row[name] = {'type': 'uri', 'value': value}
    return row


def make_client(payload=None, error=None, status_error=None):
    session = MagicMock()
    response = MagicMock()
    response.json.return_value = payload
    if status_error:
        response.raise_for_status.side_effect = status_error
    if error:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    client = WikidataClient(ENDPOINT, "wikidle-tests/0.1", timeout=5, session=session)
    return client, session


class TestFetchCandidates:
    def test_sends_query_with_headers(self):
        client, session = make_client({'results': {'bindings': [binding('Crane')]}})

        candidates = client.fetch_candidates('en', 'nouns', limit=10)

        assert [c.lemma for c in candidates] == ['crane']
        args, kwargs = session.get.call_args
        assert args[0] == ENDPOINT
        assert kwargs['params']['format'] == 'json'
        assert 'wd:Q1860' in kwargs['params']['query']
        assert kwargs['headers']['User-Agent'] == "wikidle-tests/0.1"
        assert kwargs['timeout'] == 5

    def test_empty_result(self):
        client, _ = make_client({'results': {'bindings': []}})
        assert client.fetch_candidates('de') == []

    def test_network_failure(self):
        client, _ = make_client(error=requests.ConnectionError("refused"))

        with pytest.raises(WordSourceError, match="refused"):
            client.fetch_candidates('en')

    def test_http_error(self):
        client, _ = make_client(status_error=requests.HTTPError("429 Too Many Requests"))

        with pytest.raises(WordSourceError):
            client.fetch_candidates('en')

    def test_malformed_payload(self):
        client, _ = make_client({'head': {}})

        with pytest.raises(WordSourceError, match="Unexpected response shape"):
            client.fetch_candidates('en')

    def test_unsupported_language_does_not_hit_network(self):
        client, session = make_client({'results': {'bindings': []}})

        with pytest.raises(WordSourceError):
            client.fetch_candidates('xx')
        session.get.assert_not_called()


class TestParseBindings:
    def test_full_row(self):
        row = binding(
            'Katze',
            lexeme='http://www.wikidata.org/entity/L1234',
            gender='http://www.wikidata.org/entity/Q1775415',
            image='http://commons.wikimedia.org/wiki/Special:FilePath/Cat.jpg',
            audio='http://commons.wikimedia.org/wiki/Special:FilePath/De-Katze.ogg',
        )
        row['plurals'] = {'type': 'literal', 'value': 'Katzen'}
        row['description'] = {'type': 'literal', 'value': 'Haustier'}
        row['translations'] = {'type': 'literal', 'value': 'cat, female cat'}

        [word] = WikidataClient.parse_bindings([row])

        assert word.lemma == 'katze'
        assert word.lexeme_id == 'L1234'
        assert word.grammatical_features.gender == 'feminine'
        assert word.grammatical_features.plurals == ('Katzen',)
        assert word.description == 'Haustier'
        assert word.translations == ('cat', 'female cat')
        assert word.audio_ref.endswith('De-Katze.ogg')

    def test_missing_optional_fields(self):
        [word] = WikidataClient.parse_bindings([binding('robot')])

        assert word.grammatical_features is None
        assert word.description is None
        assert word.image_ref is None
        assert word.translations == ()

    def test_unknown_gender_keeps_entity_id(self):
        row = binding('word', gender='http://www.wikidata.org/entity/Q42')
        [word] = WikidataClient.parse_bindings([row])
        assert word.grammatical_features.gender == 'Q42'

    def test_filters_unusable_lemmas(self):
        rows = [
            binding('ice cream'),
            binding('x-ray'),
            binding('ox'),
            binding('crane'),
            binding('Crane'),
            binding('extraordinarily'),
            {'lexeme': {'type': 'uri', 'value': 'http://www.wikidata.org/entity/L1'}},
        ]

        words = WikidataClient.parse_bindings(rows, min_length=3, max_length=12)

        assert [w.lemma for w in words] == ['crane']

    def test_non_latin_lemmas_are_kept(self):
        words = WikidataClient.parse_bindings([binding('yɛlɛ'), binding('ŵyn')])
        assert [w.lemma for w in words] == ['yɛlɛ', 'ŵyn']

    def test_decomposed_lemmas_are_composed(self):
        [word] = WikidataClient.parse_bindings([binding('Cafe\u0301')])
        assert word.lemma == 'caf\u00e9'
