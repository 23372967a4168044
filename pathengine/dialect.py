#!/usr/bin/env python3
"""
Dialect tables: the syntax rules a path engine is bound to.

A dialect fixes the primary separator, any alternate separators accepted on
input, the list delimiter, whether drive letters and UNC roots are
recognized, and whether roots and segments compare case-sensitively.

The tables themselves are data (dictionaries/dialects.json) and are
validated against schemas/dialects.schema.json when this module is imported.
"""

import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .dictionary_loader import DictionaryLoader
from .errors import DialectConfigError, InvalidInputError

DIALECTS_DICTIONARY = "dialects.json"


@dataclass(frozen=True)
class Dialect:
    """Immutable set of path syntax rules."""
    name: str
    separator: str
    delimiter: str
    alt_separators: Tuple[str, ...] = ()
    supports_drives: bool = False
    supports_unc: bool = False
    case_sensitive: bool = True
    namespace_prefix: str = ""
    unc_namespace_prefix: str = ""

    @property
    def separators(self) -> Tuple[str, ...]:
        """Every character accepted as a separator, primary first."""
        return (self.separator,) + self.alt_separators

    def is_separator(self, char: str) -> bool:
        return bool(char) and char in self.separators

    def to_primary(self, text: str) -> str:
        """Rewrite alternate separators to the primary one."""
        for alt in self.alt_separators:
            text = text.replace(alt, self.separator)
        return text

    def fold_case(self, text: str) -> str:
        """Comparison key for roots and segments under this dialect."""
        return text if self.case_sensitive else text.lower()

    @classmethod
    def from_table(cls, table: Mapping[str, Any]) -> "Dialect":
        """Build a dialect from one validated entry of the dialect dictionary."""
        return cls(
            name=table["name"],
            separator=table["separator"],
            delimiter=table["delimiter"],
            alt_separators=tuple(table.get("alt_separators") or ()),
            supports_drives=bool(table.get("supports_drives", False)),
            supports_unc=bool(table.get("supports_unc", False)),
            case_sensitive=bool(table.get("case_sensitive", True)),
            namespace_prefix=table.get("namespace_prefix", ""),
            unc_namespace_prefix=table.get("unc_namespace_prefix", ""),
        )


def check_dialect_tables(data: Mapping[str, Any]) -> List[str]:
    """
    Rules the JSON Schema cannot express: unique names, separators that do
    not double as delimiters, and a fallback that names a defined dialect.
    """
    errors: List[str] = []
    seen: Dict[str, int] = {}
    for idx, table in enumerate(data.get("dialects") or []):
        name = table.get("name", "")
        if name in seen:
            errors.append(f"dialects[{idx}]: duplicate name '{name}' also at index {seen[name]}")
        else:
            seen[name] = idx

        separators = [table.get("separator")] + list(table.get("alt_separators") or [])
        if table.get("separator") in (table.get("alt_separators") or []):
            errors.append(f"dialects[{idx}]: separator repeated in alt_separators")
        if table.get("delimiter") in separators:
            errors.append(f"dialects[{idx}]: delimiter '{table.get('delimiter')}' is also a separator")
        if table.get("supports_unc") and not table.get("unc_namespace_prefix"):
            errors.append(f"dialects[{idx}]: supports_unc requires unc_namespace_prefix")

    fallback = (data.get("default_dialect") or {}).get("fallback")
    if fallback is not None and fallback not in seen:
        errors.append(f"default_dialect: fallback '{fallback}' is not a defined dialect")
    return errors


def load_dialect_tables(dictionary_name: str = DIALECTS_DICTIONARY) -> Dict[str, Dialect]:
    """
    Load and validate the dialect dictionary.

    Raises:
        DialectConfigError: If the dictionary is missing or fails validation
    """
    data = DictionaryLoader.load_dictionary(dictionary_name)
    if data is None:
        raise DialectConfigError(
            f"dialect dictionary not found or unreadable: {DictionaryLoader.get_dictionary_path(dictionary_name)}"
        )

    errors = DictionaryLoader.validate(data, dictionary_name) or check_dialect_tables(data)
    if errors:
        raise DialectConfigError("invalid dialect dictionary: " + "; ".join(errors))

    return {table["name"]: Dialect.from_table(table) for table in data["dialects"]}


_DIALECTS = load_dialect_tables()

for _required in ("posix", "win32"):
    if _required not in _DIALECTS:
        raise DialectConfigError(f"dialect dictionary has no '{_required}' table")

POSIX_DIALECT = _DIALECTS["posix"]
WIN32_DIALECT = _DIALECTS["win32"]


def available_dialects() -> Tuple[str, ...]:
    return tuple(sorted(_DIALECTS))


def get_dialect(name: str) -> Dialect:
    """
    Look up a dialect by name.

    Raises:
        InvalidInputError: If no dialect with that name is defined
    """
    try:
        return _DIALECTS[name]
    except (KeyError, TypeError):
        raise InvalidInputError(
            f"unknown dialect {name!r}; expected one of {', '.join(available_dialects())}",
            argument="dialect",
        ) from None


def select_default_dialect(platform: Optional[str] = None) -> Dialect:
    """
    Pick the dialect matching a host platform string.

    Args:
        platform: A ``sys.platform`` style value; defaults to the running host

    Returns:
        win32 for Windows hosts, the configured fallback (posix) otherwise
    """
    if platform is None:
        platform = sys.platform

    rules = DictionaryLoader.get_section("default_dialect", DIALECTS_DICTIONARY) or {}
    prefixes = rules.get("win32_platform_prefixes", ["win"])
    if any(platform.startswith(prefix) for prefix in prefixes):
        return WIN32_DIALECT
    return get_dialect(rules.get("fallback", "posix"))
