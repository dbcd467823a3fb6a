"""Tests for computing the imports each group references."""

import pytest

from gosplit.splitting.extractor import extract_declarations
from gosplit.splitting.imports import (
    ImportResolver,
    collect_identifiers,
    filter_imports,
)
from gosplit.splitting.partitioner import partition
from gosplit.syntax import GoParser, ImportEntry

from .fixtures import ALIASED_IMPORT_SOURCE, SERVER_SOURCE


def extract(source: str):
    return extract_declarations(GoParser().parse(source))


def resolve_all(source: str, num_files: int) -> list[list[str]]:
    """Split a source and return the import paths kept per group."""
    extracted = extract(source)
    groups = partition(
        extracted.functions,
        num_files,
        type_decls=extracted.type_decls,
        value_decls=extracted.value_decls,
    )
    resolver = ImportResolver(extracted.imports)
    return [[entry.path for entry in resolver.resolve(group)] for group in groups]


class TestCollectIdentifiers:
    """Tests for collect_identifiers."""

    def test_collects_qualifiers_and_bare_names(self):
        extracted = extract(
            'package demo\n\nfunc A(n int) string {\n\treturn strconv.Itoa(n)\n}\n'
        )
        names = collect_identifiers([extracted.functions[0].node])
        assert {'A', 'n', 'int', 'string', 'strconv', 'Itoa'} <= names

    def test_collects_package_of_qualified_types(self):
        extracted = extract(
            'package demo\n\ntype H func(r *http.Request)\n\nfunc A() {}\n'
        )
        names = collect_identifiers([extracted.type_decls[0].node])
        assert 'http' in names
        assert 'Request' in names

    def test_blank_identifier_is_not_collected(self):
        extracted = extract('package demo\n\nfunc A() {\n\t_ = 1\n}\n')
        assert '_' not in collect_identifiers([extracted.functions[0].node])

    def test_ignores_missing_nodes(self):
        assert collect_identifiers([None]) == set()


class TestFilterImports:
    """Tests for filter_imports."""

    def test_keeps_matching_entries_in_order(self):
        imports = [
            ImportEntry(path='fmt'),
            ImportEntry(path='net/http'),
            ImportEntry(path='os'),
        ]
        assert filter_imports(imports, {'os', 'fmt'}) == [imports[0], imports[2]]

    def test_blank_and_dot_imports_never_match(self):
        imports = [
            ImportEntry(path='embed', alias='_'),
            ImportEntry(path='math', alias='.'),
        ]
        assert filter_imports(imports, {'_', '.', 'embed', 'math'}) == []

    def test_alias_is_the_bound_name(self):
        imports = [ImportEntry(path='fmt', alias='f')]
        assert filter_imports(imports, {'fmt'}) == []
        assert filter_imports(imports, {'f'}) == imports


class TestImportResolver:
    """Tests for ImportResolver on real sources."""

    def test_aliased_import_only_where_used(self):
        assert resolve_all(ALIASED_IMPORT_SOURCE, 2) == [['fmt'], []]

    def test_type_declarations_contribute_to_first_group(self):
        kept = resolve_all(SERVER_SOURCE, 2)
        assert kept[0] == ['errors', 'fmt', 'net/http', 'strings']
        assert kept[1] == ['net/http']

    def test_blank_import_is_always_dropped(self):
        kept = resolve_all(SERVER_SOURCE, 1)
        assert 'embed' not in kept[0]

    def test_import_used_only_by_sibling_group_is_dropped(self):
        source = (
            'package demo\n\nimport "os"\n\n'
            'func A() { os.Exit(1) }\n\nfunc B() {}\n'
        )
        assert resolve_all(source, 2) == [['os'], []]

    def test_local_variable_shadowing_import_keeps_it(self):
        # syntactic matching cannot tell a local named "os" from the package
        source = (
            'package demo\n\nimport "os"\n\n'
            'func A() {}\n\nfunc B() {\n\tos := 1\n\t_ = os\n}\n'
        )
        assert resolve_all(source, 2) == [[], ['os']]

    def test_dot_import_is_dropped(self):
        source = (
            'package demo\n\nimport . "math"\n\n'
            'func A() float64 { return Pi }\n'
        )
        assert resolve_all(source, 1) == [[]]

    @pytest.mark.parametrize('num_files', [1, 2, 3])
    def test_resolution_never_adds_unknown_imports(self, num_files):
        extracted = extract(SERVER_SOURCE)
        for kept in resolve_all(SERVER_SOURCE, num_files):
            assert set(kept) <= {entry.path for entry in extracted.imports}

    def test_blank_import_dropped_when_range_uses_blank_identifier(self):
        source = (
            'package demo\n\nimport (\n\t_ "embed"\n\t"fmt"\n)\n\n'
            'func Show(xs []int) {\n'
            '\tfor _, x := range xs {\n\t\tfmt.Println(x)\n\t}\n}\n'
        )
        assert resolve_all(source, 1) == [['fmt']]
