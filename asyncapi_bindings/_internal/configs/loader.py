from dataclasses import dataclass
from pathlib import Path
from typing import Any

from asyncapi_bindings._internal.constants import DocumentFormat, UnknownKeyPolicy


@dataclass(kw_only=True)
class LoaderConfig:
    unknown: UnknownKeyPolicy = UnknownKeyPolicy.preserve
    format: DocumentFormat = DocumentFormat.json

    def __post_init__(self) -> None:
        self.unknown = UnknownKeyPolicy(self.unknown)
        self.format = DocumentFormat(self.format)

    @classmethod
    def for_path(cls, path: Path, **kwargs: Any) -> "LoaderConfig":
        kwargs.setdefault("format", DocumentFormat.from_path(path))
        return cls(**kwargs)
