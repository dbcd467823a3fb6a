"""Filename suffixes for split output files.

Each output file is named ``<base>_<suffix><ext>``. The suffix is derived
from the group's function names through an ordered keyword vocabulary and
made unique against the destination directory and earlier groups of the
same run.

Suffix selection, in priority order:
    1. The group carrying the type declarations uses the types suffix.
    2. Otherwise, the first keyword (in vocabulary order) contained in any
       lower-cased function name of the group.
    3. If there is no match, or the candidate is taken, the first free entry
       of the alternative word list.
    4. Then the candidate (or, without one, the first letter of the first
       function name) with a counter appended, from 1 upward.
    5. Finally the stem with the highest counter, even if it is taken.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from upath import UPath

from gosplit.exceptions import ConfigurationError, DirectoryReadError

if TYPE_CHECKING:
    from gosplit.splitting.partitioner import Group

logger = logging.getLogger(__name__)

KEYWORDS_RESOURCE = 'keywords.txt'
ALTERNATIVES_RESOURCE = 'alternatives.txt'


def parse_vocabulary(text: str) -> tuple[str, ...]:
    """Parse a word list: one entry per line, ``#`` lines and blanks skipped.

    Order and duplicates are preserved; order decides ties.
    """
    words = []
    for line in text.splitlines():
        word = line.strip()
        if word and not word.startswith('#'):
            words.append(word.lower())
    return tuple(words)


def load_vocabulary(name: str, path: str | Path | None = None) -> tuple[str, ...]:
    """Load a bundled word list, or a replacement file if ``path`` is given.

    Raises:
        ConfigurationError: If a replacement file cannot be read or is empty.
    """
    if path is None:
        text = resources.files('gosplit.data').joinpath(name).read_text('utf-8')
        return parse_vocabulary(text)

    try:
        words = parse_vocabulary(Path(path).read_text(encoding='utf-8'))
    except OSError as e:
        raise ConfigurationError(
            f'Could not read word list: {e}', config_path=str(path)
        ) from e
    if not words:
        raise ConfigurationError('Word list is empty', config_path=str(path))
    return words


@dataclass
class RunState:
    """Naming state of a single splitting run.

    Attributes:
        base_name: Source filename without extension.
        extension: Extension of generated files, including the dot.
        existing_files: Filenames present in the destination directory when
            the run started. Not refreshed during the run.
        used_suffixes: Suffixes already assigned in this run. Only grows.
    """

    base_name: str
    extension: str = '.go'
    existing_files: frozenset[str] = frozenset()
    used_suffixes: set[str] = field(default_factory=set)

    @classmethod
    def snapshot(
        cls, directory: str | Path | UPath, base_name: str, extension: str = '.go'
    ) -> RunState:
        """Create a run state from a listing of the destination directory.

        Only regular files ending in ``extension`` are recorded.

        Raises:
            DirectoryReadError: If the directory cannot be listed.
        """
        directory = UPath(directory)
        try:
            existing = frozenset(
                entry.name
                for entry in directory.iterdir()
                if entry.name.endswith(extension) and entry.is_file()
            )
        except OSError as e:
            raise DirectoryReadError(str(directory), cause=e) from e

        logger.debug(f'{len(existing)} existing {extension} files in {directory}')
        return cls(base_name=base_name, extension=extension, existing_files=existing)

    def filename(self, suffix: str) -> str:
        return f'{self.base_name}_{suffix}{self.extension}'

    def is_available(self, suffix: str) -> bool:
        return (
            suffix not in self.used_suffixes
            and self.filename(suffix) not in self.existing_files
        )

    def claim(self, suffix: str) -> str:
        self.used_suffixes.add(suffix)
        return suffix


class SuffixNamer:
    """Chooses a descriptive, unique filename suffix for each group.

    The word lists are read-only and injected at construction; all mutable
    state lives in the ``RunState`` passed to ``choose``.

    Example:
        >>> namer = SuffixNamer.from_resources()
        >>> state = RunState(base_name='handlers')
        >>> namer.choose(group, state)
        'parse'
    """

    def __init__(
        self,
        keywords: Sequence[str],
        alternatives: Sequence[str],
        types_suffix: str = 'types',
        max_counter: int = 999,
    ):
        """Initialize the namer.

        Args:
            keywords: Ordered keyword vocabulary matched against function names.
            alternatives: Ordered fallback words used on no match or collision.
            types_suffix: Suffix of the group carrying the type declarations.
            max_counter: Highest counter appended to a stem.
        """
        self.keywords = tuple(keywords)
        self.alternatives = tuple(alternatives)
        self.types_suffix = types_suffix
        self.max_counter = max_counter

    @classmethod
    def from_resources(
        cls,
        keywords_file: str | Path | None = None,
        alternatives_file: str | Path | None = None,
        types_suffix: str = 'types',
        max_counter: int = 999,
    ) -> SuffixNamer:
        """Build a namer from the bundled word lists or replacement files."""
        return cls(
            keywords=load_vocabulary(KEYWORDS_RESOURCE, keywords_file),
            alternatives=load_vocabulary(ALTERNATIVES_RESOURCE, alternatives_file),
            types_suffix=types_suffix,
            max_counter=max_counter,
        )

    def candidate(self, group: Group) -> str | None:
        """The preferred suffix before collision checks, or None on no match."""
        if group.carries_types:
            return self.types_suffix

        names = [name.lower() for name in group.function_names]
        for keyword in self.keywords:
            for name in names:
                if keyword in name:
                    return keyword
        return None

    def choose(self, group: Group, state: RunState) -> str:
        """Pick the suffix for a group and record it in ``state``."""
        candidate = self.candidate(group)
        if candidate is not None and state.is_available(candidate):
            return self._claim(group, state, candidate, 'keyword')

        for alternative in self.alternatives:
            if state.is_available(alternative):
                return self._claim(group, state, alternative, 'alternative')

        stem = candidate if candidate is not None else self._stem(group)
        for counter in range(1, self.max_counter + 1):
            numbered = f'{stem}{counter}'
            if state.is_available(numbered):
                return self._claim(group, state, numbered, 'numbered')

        logger.warning(f'No unique suffix left for group {group.index}')
        return self._claim(group, state, f'{stem}{self.max_counter}', 'exhausted')

    @staticmethod
    def _stem(group: Group) -> str:
        for name in group.function_names:
            if name:
                return name[0].lower()
        return 'funcs'

    @staticmethod
    def _claim(group: Group, state: RunState, suffix: str, how: str) -> str:
        logger.debug(f'Group {group.index}: suffix {suffix!r} ({how})')
        return state.claim(suffix)
