"""Read JSON documents from files or strings."""

from __future__ import annotations

import json
import logging
from os import PathLike
from pathlib import Path
from typing import Any, Iterator, Optional, Union

logger = logging.getLogger(__name__)


class JsonReader:
    """A parsed JSON document with keyed access and iteration over its values."""

    def __init__(self, data: Any = None, path: Optional[Path] = None) -> None:
        self.data = data
        self.path = path

    @classmethod
    def from_path(cls, path: Union[str, PathLike]) -> "JsonReader":
        """Parse the file at ``path``; raises OSError or ValueError."""
        file_path = Path(path)
        with file_path.open(encoding="utf-8") as handle:
            data = json.load(handle)
        return cls(data, file_path)

    @classmethod
    def from_string(cls, raw: str) -> "JsonReader":
        """Parse ``raw``; raises ValueError on malformed JSON."""
        return cls(json.loads(raw))

    def get(self, key: str) -> Any:
        """The value under ``key`` of the top-level object; KeyError if absent."""
        if isinstance(self.data, dict) and key in self.data:
            return self.data[key]
        message = f'Key "{key}" does not exist for json file: {self.path}'
        logger.error(message)
        raise KeyError(message)

    def __getitem__(self, key: Union[str, int]) -> Any:
        if isinstance(self.data, list):
            return self.data[key]
        return self.get(key)

    def __iter__(self) -> Iterator[Any]:
        """Iterate the values of an object, the items of an array, or a lone scalar."""
        if self.data is None:
            return iter(())
        if isinstance(self.data, dict):
            return iter(self.data.values())
        if isinstance(self.data, list):
            return iter(self.data)
        return iter((self.data,))