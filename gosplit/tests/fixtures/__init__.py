"""Test fixtures for gosplit tests.

This module provides sample Go sources and helpers for writing them into a
temporary directory.
"""

from pathlib import Path

# A package with types, consts, vars, a method and several imports
SERVER_SOURCE = '''package server

import (
	"errors"
	"fmt"
	"net/http"
	str "strings"
	_ "embed"
)

// Config holds server settings.
type Config struct {
	Addr    string
	Timeout int
}

type Handler func(w http.ResponseWriter, r *http.Request)

const defaultAddr = ":8080"

var ErrClosed = errors.New("server closed")

// ParseAddr validates an address.
func ParseAddr(addr string) (string, error) {
	if addr == "" {
		return defaultAddr, nil
	}
	return str.TrimSpace(addr), nil
}

func LoadConfig(path string) (*Config, error) {
	return &Config{Addr: path}, nil
}

func (c *Config) Describe() string {
	return fmt.Sprintf("%s (%d)", c.Addr, c.Timeout)
}

func SaveConfig(c *Config) error {
	return nil
}

func Serve(c *Config) error {
	return http.ListenAndServe(c.Addr, nil)
}
'''

# One function uses an aliased import, the other uses none
ALIASED_IMPORT_SOURCE = '''package demo

import (
	fmtPkg "fmt"
	"strings"
)

func First() {
	fmtPkg.Println("first")
}

func Second() int {
	return 2
}
'''

# Types but no functions
TYPES_ONLY_SOURCE = '''package demo

type Point struct {
	X, Y int
}
'''

BROKEN_SOURCE = '''package demo

func Oops( {
	return
'''

# No keyword of the vocabulary occurs in "qz" or "zq"
NO_KEYWORD_SOURCE = '''package demo

func Qz() {}

func Zq() {}
'''


def numbered_functions_source(count: int, package: str = 'demo') -> str:
    """Build a Go source with functions F1..F<count>, in order."""
    functions = '\n\n'.join(f'func F{i}() {{}}' for i in range(1, count + 1))
    return f'package {package}\n\n{functions}\n'


def write_source(directory: Path, name: str, content: str) -> Path:
    """Write a Go source file and return its path."""
    path = directory / name
    path.write_text(content, encoding='utf-8')
    return path


def go_files(directory: Path) -> list[str]:
    """Names of the .go files in a directory, sorted."""
    return sorted(p.name for p in directory.iterdir() if p.suffix == '.go')
