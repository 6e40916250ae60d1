"""Named card libraries stored as JSON arrays of strings.

Layout under the library directory::

    prompts/<name>.json
    answers/<name>.json
"""

import json
from pathlib import Path
from typing import List, Optional, Union

from .errors import GameCoreError

DECK_KINDS = ('prompts', 'answers')
DEFAULT_DECK_DIR = Path(__file__).resolve().parent.parent.parent / 'decks'


class DeckLibraryNotFound(GameCoreError):
    kind = 'deck_library_not_found'

    def __init__(self, deck_kind: str, library: str) -> None:
        super().__init__(f'No {deck_kind} library named {library}.', deck_kind=deck_kind, library=library)


class InvalidDeckLibrary(GameCoreError):
    kind = 'invalid_deck_library'

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'Library file {path.name} is not usable: {reason}', library=path.stem)


def _kind_dir(kind: str, base_dir: Optional[Union[str, Path]]) -> Path:
    if kind not in DECK_KINDS:
        raise ValueError(f"kind must be one of {DECK_KINDS}, got {kind!r}")
    return Path(base_dir or DEFAULT_DECK_DIR) / kind


def available_libraries(kind: str, base_dir: Optional[Union[str, Path]] = None) -> List[str]:
    directory = _kind_dir(kind, base_dir)
    if not directory.is_dir():
        return []
    return sorted(p.stem for p in directory.glob('*.json'))


def load_library(kind: str, name: str, base_dir: Optional[Union[str, Path]] = None) -> List[str]:
    directory = _kind_dir(kind, base_dir)
    # Library names are plain file stems; anything path-like is treated as unknown.
    if not name or Path(name).name != name:
        raise DeckLibraryNotFound(kind, name)
    path = directory / f'{name}.json'
    if not path.is_file():
        raise DeckLibraryNotFound(kind, name)

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidDeckLibrary(path, str(exc)) from exc

    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise InvalidDeckLibrary(path, 'expected a JSON array of strings')
    return data
