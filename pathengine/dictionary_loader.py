#!/usr/bin/env python3
"""
Dictionary loader for the packaged dialect tables.

Dialect rules (separators, delimiter, drive/UNC support, namespace prefixes)
are shipped as JSON dictionaries next to this module. They are read once,
cached per file name, and validated against the matching JSON Schema before
any engine is built from them.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator


class DictionaryLoader:
    """Cached access to the JSON dictionaries bundled with the package."""

    _cache: Dict[str, Any] = {}

    @staticmethod
    def get_dictionary_path(dictionary_name: str = "dialects.json") -> Path:
        """Absolute path to a bundled dictionary file."""
        return Path(__file__).resolve().parent / "dictionaries" / dictionary_name

    @staticmethod
    def get_schema_path(dictionary_name: str = "dialects.json") -> Path:
        """
        Absolute path to the JSON Schema describing a dictionary.

        Schemas share the dictionary's stem: ``dialects.json`` is described by
        ``schemas/dialects.schema.json``.
        """
        stem = Path(dictionary_name).stem
        return Path(__file__).resolve().parent / "schemas" / f"{stem}.schema.json"

    @classmethod
    def load_dictionary(
        cls,
        dictionary_name: str = "dialects.json",
        use_cache: bool = True
    ) -> Optional[Any]:
        """
        Load a dictionary from the dictionaries folder.

        Args:
            dictionary_name: Name of the dictionary file to load
            use_cache: Whether to use the cached version if available

        Returns:
            Parsed JSON contents, or None if the file is missing or unreadable
        """
        if use_cache and dictionary_name in cls._cache:
            return cls._cache[dictionary_name]

        dictionary_path = cls.get_dictionary_path(dictionary_name)

        try:
            with open(dictionary_path, 'r', encoding='utf-8') as f:
                dictionary = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError, IOError):
            return None

        if use_cache:
            cls._cache[dictionary_name] = dictionary
        return dictionary

    @classmethod
    def get_section(
        cls,
        section_name: str,
        dictionary_name: str = "dialects.json",
        use_cache: bool = True
    ) -> Any:
        """
        Load one top-level section of a dictionary.

        Returns:
            The requested section, or None if the dictionary or section is absent
        """
        dictionary = cls.load_dictionary(dictionary_name, use_cache)
        if dictionary is None:
            return None
        return dictionary.get(section_name)

    @classmethod
    def validate(cls, data: Any, dictionary_name: str = "dialects.json") -> List[str]:
        """
        Validate dictionary contents against its JSON Schema.

        Returns:
            A list of "label: location: message" strings, empty when valid
        """
        schema_path = cls.get_schema_path(dictionary_name)
        with schema_path.open("r", encoding="utf-8") as handle:
            schema = json.load(handle)

        validator = Draft7Validator(schema)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])

        messages = []
        for error in errors:
            location = " > ".join(str(p) for p in error.absolute_path) or "root"
            messages.append(f"{dictionary_name}: {location}: {error.message}")
        return messages

    @classmethod
    def clear_cache(cls, dictionary_name: Optional[str] = None) -> None:
        """Clear one cached dictionary, or all of them when no name is given."""
        if dictionary_name:
            cls._cache.pop(dictionary_name, None)
        else:
            cls._cache.clear()
