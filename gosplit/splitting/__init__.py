"""File splitting for gosplit.

This package redistributes the top-level declarations of one Go file across
several new files.

Classes:
    FileSplitter: Runs a complete split of one file.
    Group: One slice of functions destined for a single output file.
    ImportResolver: Filters the import list down to what a group references.
    SuffixNamer: Chooses a unique filename suffix per group.
    RunState: Naming state shared by the groups of one run.
    OutputAssembler: Prints and writes the file for a group.
    GoFileWriter: Writes Go source to new files.
"""

from gosplit.splitting.emitter import EmittedFile, GoFileWriter, OutputAssembler
from gosplit.splitting.extractor import ExtractedSource, extract_declarations
from gosplit.splitting.imports import (
    ImportResolver,
    collect_identifiers,
    filter_imports,
)
from gosplit.splitting.naming import RunState, SuffixNamer, load_vocabulary
from gosplit.splitting.partitioner import Group, group_size, partition
from gosplit.splitting.splitter import FileSplitter

__all__ = [
    'EmittedFile',
    'ExtractedSource',
    'FileSplitter',
    'GoFileWriter',
    'Group',
    'ImportResolver',
    'OutputAssembler',
    'RunState',
    'SuffixNamer',
    'collect_identifiers',
    'extract_declarations',
    'filter_imports',
    'group_size',
    'load_vocabulary',
    'partition',
]
