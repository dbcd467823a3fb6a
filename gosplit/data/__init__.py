"""Bundled word lists for output filename suffixes."""
