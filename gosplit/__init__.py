"""gosplit - Split a Go source file into several well-formed files.

gosplit redistributes the top-level declarations of one Go file across N new
files in the same directory. Each new file keeps the package clause and only
the imports its code references; the first one also receives all type, const
and var declarations. Output files are named after what their functions do.

Quick Start:
    >>> from gosplit import FileSplitter, get_config
    >>>
    >>> splitter = FileSplitter(get_config())
    >>> for emitted in splitter.split('internal/handlers.go', 3):
    ...     print(emitted.path)

CLI Usage:
    $ gosplit split internal/handlers.go 3
    $ gosplit version
"""

from importlib.metadata import PackageNotFoundError, version

from gosplit.config import SplitterConfig, get_config
from gosplit.exceptions import (
    ConfigurationError,
    DirectoryReadError,
    EmptyInputError,
    GoSplitError,
    ParseError,
    UsageError,
    WriteError,
)
from gosplit.splitting import EmittedFile, FileSplitter
from gosplit.syntax import GoParser, GoPrinter

__all__ = [
    # Main classes
    'FileSplitter',
    'EmittedFile',
    'GoParser',
    'GoPrinter',
    # Configuration
    'SplitterConfig',
    'get_config',
    # Exceptions
    'GoSplitError',
    'UsageError',
    'ParseError',
    'EmptyInputError',
    'DirectoryReadError',
    'WriteError',
    'ConfigurationError',
]

try:
    __version__ = version('gosplit')
except PackageNotFoundError:
    __version__ = 'unknown'
