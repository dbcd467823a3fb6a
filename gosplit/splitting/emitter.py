"""Assembly and writing of split Go files.

This module provides ``GoFileWriter``, which writes Go source to disk with
validation, and ``OutputAssembler``, which turns a finished ``Group`` into a
printed file next to the source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from upath import UPath

from gosplit.exceptions import ParseError, WriteError
from gosplit.syntax.nodes import SourceFile

if TYPE_CHECKING:
    from gosplit.splitting.partitioner import Group
    from gosplit.syntax.nodes import ImportEntry
    from gosplit.syntax.parser import GoParser
    from gosplit.syntax.printer import GoPrinter

logger = logging.getLogger(__name__)


@dataclass
class EmittedFile:
    """Information about a written output file.

    Attributes:
        path: The file that was created.
        suffix: The filename suffix chosen for its group.
        function_names: Names of the functions it holds, in order.
        imports: Import paths it declares.
    """

    path: UPath
    suffix: str
    function_names: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)


class GoFileWriter:
    """Writes Go source text to new files.

    Files are created exclusively: an existing file at the target path is an
    error, never overwritten.

    Example:
        >>> writer = GoFileWriter(GoParser())
        >>> writer.write('package demo\\n', Path('demo_types.go'))
    """

    def __init__(self, parser: GoParser | None = None):
        """Initialize the writer.

        Args:
            parser: If given, content is re-parsed before writing and
                rejected when it is not valid Go.
        """
        self.parser = parser

    def write(self, content: str, path: UPath | Path | str) -> None:
        """Write Go source to a new file.

        Raises:
            WriteError: If the content does not parse, the file already
                exists, or the file cannot be written.
        """
        path = UPath(path)

        if self.parser is not None:
            try:
                self.parser.parse(content, path=str(path))
            except ParseError as e:
                raise WriteError(str(path), cause=e) from e

        try:
            with path.open('x', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            raise WriteError(str(path), cause=e) from e


class OutputAssembler:
    """Builds, prints and writes the file for each finished group.

    The output file for a group is ``<output_dir>/<base_name>_<suffix><ext>``
    and contains, in order: the package clause, the group's imports, the
    pinned type/const/var declarations (group 0 only) and its functions.
    """

    def __init__(
        self,
        printer: GoPrinter,
        writer: GoFileWriter,
        output_dir: UPath | Path | str,
        base_name: str,
        package_name: str,
        extension: str = '.go',
    ):
        self.printer = printer
        self.writer = writer
        self.output_dir = UPath(output_dir)
        self.base_name = base_name
        self.package_name = package_name
        self.extension = extension

    def output_path(self, suffix: str) -> UPath:
        return self.output_dir / f'{self.base_name}_{suffix}{self.extension}'

    def assemble(self, group: Group) -> SourceFile:
        """Build the synthetic declaration list for a group."""
        imports: list[ImportEntry] = list(group.imports)
        return SourceFile(
            package_name=self.package_name,
            imports=imports,
            declarations=[*group.pinned_decls, *group.functions],
        )

    def emit(self, group: Group) -> EmittedFile:
        """Print and write a group's file.

        Raises:
            ValueError: If the group has no suffix yet.
            WriteError: If the file cannot be written.
        """
        if group.suffix is None:
            raise ValueError(f'group {group.index} has no suffix')

        path = self.output_path(group.suffix)
        content = self.printer.print(self.assemble(group))
        self.writer.write(content, path)

        logger.info(f'Wrote {path} ({len(group.functions)} functions)')
        return EmittedFile(
            path=path,
            suffix=group.suffix,
            function_names=group.function_names,
            imports=[entry.path for entry in group.imports],
        )
