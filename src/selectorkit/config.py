from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    separators: tuple[str, str] = (",", ":")  # compact, no whitespace
    ensure_ascii: bool = False
    indent: int | None = None
    nan_as_null: bool = True  # False: non-finite floats raise ValueError


DEFAULT_CODEC_CONFIG = CodecConfig()
