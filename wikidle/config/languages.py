"""
Supported Languages and Word Kinds

Maps language codes and word kinds to the Wikidata items used when
querying lexemes.
"""

from typing import Dict, Final

SUPPORTED_LANGUAGES: Final[Dict[str, Dict]] = {
    'en': {'qid': 'Q1860', 'name': 'English', 'native_name': 'English'},
    'fr': {'qid': 'Q150', 'name': 'French', 'native_name': 'Français'},
    'de': {'qid': 'Q188', 'name': 'German', 'native_name': 'Deutsch'},
    'es': {'qid': 'Q1321', 'name': 'Spanish', 'native_name': 'Español'},
    'cy': {'qid': 'Q9309', 'name': 'Welsh', 'native_name': 'Cymraeg'},
    'eu': {'qid': 'Q8752', 'name': 'Basque', 'native_name': 'Euskara'},
    'dag': {'qid': 'Q32238', 'name': 'Dagbani', 'native_name': 'Dagbanli'},
}

# Lexical category items
WORD_KINDS: Final[Dict[str, str]] = {
    'nouns': 'Q1084',
    'verbs': 'Q24905',
    'adjectives': 'Q34698',
}

DEFAULT_WORD_KIND: Final[str] = 'nouns'

# Grammatical gender items
GENDER_LABELS: Final[Dict[str, str]] = {
    'Q499327': 'masculine',
    'Q1775415': 'feminine',
    'Q1775461': 'neuter',
    'Q1305037': 'common',
}


def get_language(code: str) -> Dict:
    """
    Looks up a supported language by code.

    Raises:
        ValueError: If the language is not supported
    """
    try:
        language = SUPPORTED_LANGUAGES[code]
    except KeyError:
        raise ValueError(f"Unsupported language: {code}")
    return {'code': code, **language}


def get_language_name(code: str) -> str:
    """Display name for a language code, falling back to the upper-cased code."""
    language = SUPPORTED_LANGUAGES.get(code)
    return language['name'] if language else code.upper()
