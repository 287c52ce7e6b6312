from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NestmarkConfig:
    default_tag: str = "div"  # used for tagless selectors that emit an element
    encoding: str = "utf-8"
    log_level: str = "WARNING"
