"""
Front end configuration for Lumen.

A single immutable record passed to the lexer and parser. ``None`` is
accepted anywhere a config is expected and means the defaults.

Usage:
    config = FrontendConfig(filename="script.lm", require_statement_terminator=True)
    tree = parse_string("let x = 1;", config=config)

Author: xwest
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True, slots=True)
class FrontendConfig:
    """Immutable front end configuration.

    Attributes:
        filename: Name reported in diagnostic source locations
        require_statement_terminator: Require and consume a ';' after a
            statement instead of leaving the following token unconsumed
        max_nesting_depth: Deepest parenthesis nesting the parser accepts
            before reporting an error
    """

    filename: str = "<string>"
    require_statement_terminator: bool = False
    max_nesting_depth: int = 100

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "FrontendConfig":
        """Create a FrontendConfig from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


DEFAULT_CONFIG = FrontendConfig()


def resolve_config(config: Optional[FrontendConfig]) -> FrontendConfig:
    """Return ``config`` or the default configuration."""
    return DEFAULT_CONFIG if config is None else config
