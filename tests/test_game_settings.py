import pytest

from wikidle.config.game_settings import (
    DEFAULT_SETTINGS, calculate_points, get_allowed_hints, validate_settings
)
from wikidle.config.languages import get_language, get_language_name
from wikidle.models import HintKind


def test_difficulty_tiers():
    assert get_allowed_hints('easy') == [HintKind.GRAMMATICAL_FEATURES, HintKind.DEFINITION]
    assert get_allowed_hints('medium') == [HintKind.IMAGE, HintKind.TRANSLATIONS]
    assert get_allowed_hints('hard') == [HintKind.PRONUNCIATION]
    assert get_allowed_hints('impossible') == get_allowed_hints('medium')


def test_points():
    assert calculate_points(False, 3) == 0
    assert calculate_points(True, 0) == 100
    assert calculate_points(True, 5) == 150


def test_defaults_are_valid():
    assert validate_settings(dict(DEFAULT_SETTINGS)) == (True, "")


@pytest.mark.parametrize("settings,message", [
    ({'colour': 'blue'}, "Unknown settings"),
    ({'difficulty': 'nightmare'}, "Difficulty must be one of"),
    ({'enable_hints': 'yes'}, "enable_hints must be true or false"),
    ({'max_attempts': '6'}, "max_attempts must be an integer"),
    ({'max_attempts': True}, "max_attempts must be an integer"),
    ({'max_attempts': 0}, "between 1 and 10"),
    ({'max_attempts': 11}, "between 1 and 10"),
    ({'min_length': 2}, "Word lengths"),
    ({'min_length': 8, 'max_length': 5}, "Word lengths"),
    ({'max_length': 13}, "Word lengths"),
])
def test_invalid_settings(settings, message):
    is_valid, error = validate_settings(settings)
    assert not is_valid
    assert message in error


def test_languages():
    assert get_language('cy')['qid'] == 'Q9309'
    assert get_language_name('dag') == 'Dagbani'
    with pytest.raises(ValueError):
        get_language('tlh')
