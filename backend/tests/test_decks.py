import json

import pytest

from blankparty.services.games.decks import (
    DeckLibraryNotFound,
    InvalidDeckLibrary,
    available_libraries,
    load_library,
)


def test_bundled_default_library():
    assert 'default' in available_libraries('prompts')
    assert 'default' in available_libraries('answers')
    prompts = load_library('prompts', 'default')
    answers = load_library('answers', 'default')
    assert prompts and all(isinstance(p, str) for p in prompts)
    assert len(answers) >= 40


def test_unknown_library():
    with pytest.raises(DeckLibraryNotFound) as excinfo:
        load_library('answers', 'nope')
    assert excinfo.value.details == {'deck_kind': 'answers', 'library': 'nope'}


def test_path_like_names_are_rejected():
    with pytest.raises(DeckLibraryNotFound):
        load_library('answers', '../prompts/default')


def test_unknown_kind():
    with pytest.raises(ValueError):
        load_library('jokers', 'default')


def test_custom_library_dir(tmp_path):
    (tmp_path / 'prompts').mkdir()
    (tmp_path / 'prompts' / 'tiny.json').write_text(json.dumps(['A _', 'B _']))
    (tmp_path / 'prompts' / 'broken.json').write_text('{"not": "a list"}')

    assert available_libraries('prompts', base_dir=tmp_path) == ['broken', 'tiny']
    assert available_libraries('answers', base_dir=tmp_path) == []
    assert load_library('prompts', 'tiny', base_dir=tmp_path) == ['A _', 'B _']
    with pytest.raises(InvalidDeckLibrary):
        load_library('prompts', 'broken', base_dir=tmp_path)
