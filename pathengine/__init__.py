"""
Lexical path manipulation for POSIX and win32 path dialects.

This package contains the processing stages:
- dialect: Dialect tables loaded from dictionaries/dialects.json
- tokenizer: Root detection and segment tokenization
- trimmer: Separator trimming helpers
- normalizer: "." / ".." resolution and separator collapsing
- joiner: Segment concatenation
- resolver: Absolute resolution, relative paths, is_absolute
- path_parser: parse() / format() structural conversion
- name_extractor: basename, dirname, extname
- namespacer: Long-path namespacing (win32)
- engine: PathEngine binding every stage to one dialect

The module-level functions below are bound to the default engine, selected
once from the host platform. ``posix`` and ``win32`` are always available.
"""

# Explicit imports make the public API clear and prevent namespace pollution
from .errors import (
    PathEngineError,
    InvalidInputError,
    IncompatibleRootsError,
    DialectConfigError
)
from .dialect import Dialect, POSIX_DIALECT, WIN32_DIALECT, get_dialect, select_default_dialect
from .tokenizer import PathTokenizer, PathTokens, Token
from .trimmer import Trimmer
from .normalizer import Normalizer
from .joiner import Joiner
from .resolver import PathResolver
from .path_parser import PathParser, ParsedPath, split_extension
from .name_extractor import NameExtractor
from .namespacer import Namespacer
from .engine import PathEngine, default, get_engine, posix, win32

sep = default.sep
delimiter = default.delimiter

normalize = default.normalize
join = default.join
resolve = default.resolve
relative = default.relative
parse = default.parse
format = default.format
basename = default.basename
dirname = default.dirname
extname = default.extname
is_absolute = default.is_absolute
to_namespaced_path = default.to_namespaced_path

__all__ = [
    'PathEngineError',
    'InvalidInputError',
    'IncompatibleRootsError',
    'DialectConfigError',
    'Dialect',
    'POSIX_DIALECT',
    'WIN32_DIALECT',
    'get_dialect',
    'select_default_dialect',
    'PathTokenizer',
    'PathTokens',
    'Token',
    'Trimmer',
    'Normalizer',
    'Joiner',
    'PathResolver',
    'PathParser',
    'ParsedPath',
    'split_extension',
    'NameExtractor',
    'Namespacer',
    'PathEngine',
    'default',
    'get_engine',
    'posix',
    'win32',
    'sep',
    'delimiter',
    'normalize',
    'join',
    'resolve',
    'relative',
    'parse',
    'format',
    'basename',
    'dirname',
    'extname',
    'is_absolute',
    'to_namespaced_path',
]
