"""Go source printer.

Renders a ``SourceFile`` into Go text and, when available, normalizes it
with ``gofmt``.
"""

import logging
import shutil
import subprocess

from gosplit.syntax.nodes import ImportEntry, SourceFile

logger = logging.getLogger(__name__)


class GoPrinter:
    """Turns ``SourceFile`` objects into formatted Go source.

    Example:
        >>> printer = GoPrinter(gofmt=False)
        >>> printer.print(SourceFile(package_name='demo'))
        'package demo\\n'
    """

    def __init__(self, gofmt: bool = True, gofmt_command: str = 'gofmt'):
        """Initialize the printer.

        Args:
            gofmt: Whether to pipe the rendered text through gofmt.
            gofmt_command: Name or path of the gofmt executable.
        """
        self.gofmt = gofmt
        self.gofmt_command = gofmt_command

    def print(self, source_file: SourceFile) -> str:
        """Render a source file, formatted with gofmt if enabled."""
        text = self.render(source_file)
        if self.gofmt:
            text = self._run_gofmt(text)
        return text

    def render(self, source_file: SourceFile) -> str:
        """Render a source file without running any formatter.

        Sections are separated by one blank line: package clause, import
        clause (omitted when there are no imports), then each declaration.
        """
        sections = [f'package {source_file.package_name}']

        if source_file.imports:
            sections.append(_render_imports(source_file.imports))

        for declaration in source_file.declarations:
            sections.append(declaration.text.strip('\n'))

        return '\n\n'.join(sections) + '\n'

    def _run_gofmt(self, text: str) -> str:
        executable = shutil.which(self.gofmt_command)
        if executable is None:
            logger.debug(f'{self.gofmt_command} not found, output left unformatted')
            return text

        result = subprocess.run(
            [executable],
            input=text,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.warning(
                f'{self.gofmt_command} failed, output left unformatted: '
                f'{result.stderr.strip()}'
            )
            return text
        return result.stdout


def _render_imports(imports: list[ImportEntry]) -> str:
    if len(imports) == 1:
        return f'import {imports[0].to_source()}'
    lines = ['import (']
    lines.extend(f'\t{entry.to_source()}' for entry in imports)
    lines.append(')')
    return '\n'.join(lines)
