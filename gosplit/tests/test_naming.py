"""Tests for filename suffix selection."""

import pytest

from gosplit.exceptions import ConfigurationError, DirectoryReadError
from gosplit.splitting.naming import (
    RunState,
    SuffixNamer,
    load_vocabulary,
    parse_vocabulary,
)
from gosplit.splitting.partitioner import Group
from gosplit.syntax import FunctionDecl


def make_group(*names: str, index: int = 1, types: bool = False) -> Group:
    """Create a group of text-only functions with the given names."""
    return Group(
        index=index,
        functions=[FunctionDecl(name=name, text='') for name in names],
        type_decls=[] if types else None,
    )


@pytest.fixture
def namer():
    return SuffixNamer.from_resources()


@pytest.fixture
def state():
    return RunState(base_name='demo')


class TestVocabulary:
    """Tests for loading the word lists."""

    def test_bundled_keywords_start_with_parse(self):
        keywords = load_vocabulary('keywords.txt')
        assert keywords[:3] == ('parse', 'generate', 'create')
        assert '#' not in ''.join(keywords)

    def test_bundled_alternatives_start_with_core(self):
        alternatives = load_vocabulary('alternatives.txt')
        assert alternatives[:3] == ('core', 'main', 'base')
        assert alternatives[-1] == 'pluto'

    def test_parse_keeps_order_and_duplicates(self):
        text = '# header\nmap\n\nset\nmap\n'
        assert parse_vocabulary(text) == ('map', 'set', 'map')

    def test_replacement_file(self, tmp_path):
        path = tmp_path / 'words.txt'
        path.write_text('alpha\nbeta\n')
        assert load_vocabulary('keywords.txt', path) == ('alpha', 'beta')

    def test_empty_replacement_file(self, tmp_path):
        path = tmp_path / 'words.txt'
        path.write_text('# nothing\n')
        with pytest.raises(ConfigurationError):
            load_vocabulary('keywords.txt', path)

    def test_missing_replacement_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_vocabulary('keywords.txt', tmp_path / 'missing.txt')


class TestRunState:
    """Tests for RunState."""

    def test_snapshot_lists_only_matching_files(self, tmp_path):
        (tmp_path / 'demo_parse.go').write_text('package demo\n')
        (tmp_path / 'notes.txt').write_text('')
        (tmp_path / 'dir.go').mkdir()

        state = RunState.snapshot(tmp_path, 'demo')

        assert state.existing_files == frozenset({'demo_parse.go'})
        assert state.used_suffixes == set()

    def test_snapshot_of_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryReadError) as exc_info:
            RunState.snapshot(tmp_path / 'missing', 'demo')
        assert 'missing' in exc_info.value.directory

    def test_availability_checks_both_sources(self):
        state = RunState(base_name='demo', existing_files=frozenset({'demo_load.go'}))
        state.claim('save')

        assert not state.is_available('load')
        assert not state.is_available('save')
        assert state.is_available('parse')

    def test_filename(self, state):
        assert state.filename('types') == 'demo_types.go'


class TestSuffixNamer:
    """Tests for SuffixNamer.choose."""

    def test_types_group_uses_types_suffix(self, namer, state):
        group = make_group('ParseHeader', index=0, types=True)
        assert namer.choose(group, state) == 'types'

    def test_first_keyword_in_vocabulary_order_wins(self, namer, state):
        # "load" precedes "save" in the vocabulary, regardless of group order
        assert namer.choose(make_group('saveUser', 'loadUser'), state) == 'load'

    def test_keyword_may_match_any_function(self, namer, state):
        assert namer.choose(make_group('Qz', 'ReloadCache'), state) == 'load'

    def test_matching_is_case_insensitive(self, namer, state):
        assert namer.choose(make_group('PARSEHEADER'), state) == 'parse'

    def test_no_keyword_uses_first_alternative(self, namer, state):
        assert namer.choose(make_group('Qz', 'Zq'), state) == 'core'

    def test_chosen_suffix_is_recorded(self, namer, state):
        namer.choose(make_group('ParseA'), state)
        assert 'parse' in state.used_suffixes

    def test_suffix_used_earlier_in_run_is_not_reused(self, namer, state):
        first = namer.choose(make_group('ParseA', index=1), state)
        second = namer.choose(make_group('ParseB', index=2), state)
        third = namer.choose(make_group('ParseC', index=3), state)
        assert (first, second, third) == ('parse', 'core', 'main')

    def test_existing_file_forces_alternative(self, namer):
        state = RunState(base_name='demo', existing_files=frozenset({'demo_parse.go'}))
        assert namer.choose(make_group('ParseHeader'), state) == 'core'

    def test_existing_types_file_forces_alternative(self, namer):
        state = RunState(base_name='demo', existing_files=frozenset({'demo_types.go'}))
        group = make_group('A', index=0, types=True)
        assert namer.choose(group, state) == 'core'

    def test_existing_files_of_other_bases_do_not_collide(self, namer):
        state = RunState(base_name='demo', existing_files=frozenset({'other_parse.go'}))
        assert namer.choose(make_group('ParseHeader'), state) == 'parse'

    def test_numbered_after_alternatives_are_exhausted(self):
        namer = SuffixNamer(keywords=['parse'], alternatives=['core'], max_counter=3)
        state = RunState(
            base_name='demo',
            existing_files=frozenset({'demo_parse.go', 'demo_core.go'}),
        )
        assert namer.choose(make_group('ParseA'), state) == 'parse1'
        assert namer.choose(make_group('ParseB'), state) == 'parse2'

    def test_numbered_stem_without_keyword_is_first_letter(self):
        namer = SuffixNamer(keywords=['parse'], alternatives=[], max_counter=3)
        state = RunState(base_name='demo')
        assert namer.choose(make_group('Qz', 'Zq'), state) == 'q1'

    def test_last_resort_is_not_unique(self):
        namer = SuffixNamer(keywords=['parse'], alternatives=['core'], max_counter=2)
        state = RunState(base_name='demo')
        state.used_suffixes.update({'parse', 'core', 'parse1', 'parse2'})

        assert namer.choose(make_group('ParseA'), state) == 'parse2'

    def test_custom_types_suffix(self, state):
        namer = SuffixNamer(keywords=[], alternatives=[], types_suffix='models')
        group = make_group('A', index=0, types=True)
        assert namer.choose(group, state) == 'models'

    def test_candidate_is_none_without_match(self, namer):
        assert namer.candidate(make_group('Qz')) is None
