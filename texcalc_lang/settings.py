import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class ParserSettings:
    debug: bool = False
    cache_grammar: bool = False

    @classmethod
    def from_env(cls) -> "ParserSettings":
        return cls(
            debug=_flag("TEXCALC_DEBUG"),
            cache_grammar=_flag("TEXCALC_CACHE_GRAMMAR"),
        )
