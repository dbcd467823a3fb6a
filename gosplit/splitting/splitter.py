"""Top-level splitting run.

``FileSplitter`` wires the parser, extractor, partitioner, import resolver,
suffix namer and output assembler together. Groups are processed strictly in
order, and the first failure aborts the run. Files written for earlier
groups stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from upath import UPath

from gosplit.config import SplitterConfig
from gosplit.exceptions import EmptyInputError, UsageError
from gosplit.splitting.emitter import EmittedFile, GoFileWriter, OutputAssembler
from gosplit.splitting.extractor import extract_declarations
from gosplit.splitting.imports import ImportResolver
from gosplit.splitting.naming import RunState, SuffixNamer
from gosplit.splitting.partitioner import partition
from gosplit.syntax.parser import GoParser
from gosplit.syntax.printer import GoPrinter

logger = logging.getLogger(__name__)


class FileSplitter:
    """Splits one Go source file into several files beside it.

    Example:
        >>> splitter = FileSplitter(get_config())
        >>> for emitted in splitter.iter_split('pkg/handlers.go', 3):
        ...     print(emitted.path)
    """

    def __init__(
        self,
        config: SplitterConfig | None = None,
        namer: SuffixNamer | None = None,
    ):
        """Initialize the splitter.

        Args:
            config: Settings for the run; defaults are used if omitted.
            namer: Suffix namer to use instead of one built from ``config``.
        """
        self.config = config or SplitterConfig()
        self.parser = GoParser()
        self.printer = GoPrinter(
            gofmt=self.config.gofmt, gofmt_command=self.config.gofmt_command
        )
        self.writer = GoFileWriter(
            self.parser if self.config.validate_output else None
        )
        self.namer = namer or SuffixNamer.from_resources(
            keywords_file=self.config.keywords_file,
            alternatives_file=self.config.alternatives_file,
            types_suffix=self.config.types_suffix,
            max_counter=self.config.max_numbered_suffix,
        )

    def iter_split(
        self, input_file: str | Path, num_files: int
    ) -> Iterator[EmittedFile]:
        """Split a file, yielding each output file as soon as it is written.

        Args:
            input_file: The Go source file to split.
            num_files: Requested number of output files.

        Yields:
            One EmittedFile per written file, in group order.

        Raises:
            UsageError: If ``num_files`` is not a positive integer.
            ParseError: If the source cannot be read or parsed.
            EmptyInputError: If the source declares no functions.
            DirectoryReadError: If the source directory cannot be listed.
            WriteError: If an output file cannot be written.
        """
        valid_count = isinstance(num_files, int) and not isinstance(num_files, bool)
        if not valid_count or num_files < 1:
            raise UsageError('num_files must be a positive integer')

        source_path = UPath(input_file)
        logger.debug(f'Splitting {source_path} into {num_files} files')
        parsed = self.parser.parse_file(source_path)
        extracted = extract_declarations(parsed)

        if not extracted.functions:
            raise EmptyInputError(str(source_path))

        base_name = source_path.name
        if base_name.endswith(self.config.extension):
            base_name = base_name[: -len(self.config.extension)]
        output_dir = source_path.parent

        state = RunState.snapshot(output_dir, base_name, self.config.extension)
        groups = partition(
            extracted.functions,
            num_files,
            type_decls=extracted.type_decls,
            value_decls=extracted.value_decls,
        )

        resolver = ImportResolver(extracted.imports)
        assembler = OutputAssembler(
            printer=self.printer,
            writer=self.writer,
            output_dir=output_dir,
            base_name=base_name,
            package_name=extracted.package_name,
            extension=self.config.extension,
        )

        for group in groups:
            group.suffix = self.namer.choose(group, state)
            group.imports = resolver.resolve(group)
            yield assembler.emit(group)

    def split(self, input_file: str | Path, num_files: int) -> list[EmittedFile]:
        """Split a file and return every written output file."""
        return list(self.iter_split(input_file, num_files))
