"""
CellGraph Configuration

This module provides configuration settings for rendering tokens,
cell rebinding policy, verification limits, and logging.
"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class FormatterConfig:
    """Tokens used when rendering a value graph."""
    back_reference: str = "*"
    uninit_token: str = "uninit"
    separator: str = ", "
    open_bracket: str = "["
    close_bracket: str = "]"


@dataclass
class CellConfig:
    """Configuration for cell mutation."""
    allow_rebind: bool = True


@dataclass
class VerifierConfig:
    """Configuration for graph verification."""
    max_depth: int = 64
    max_nodes: int = 10_000


@dataclass
class CellGraphConfig:
    """Main configuration for the CellGraph system."""
    formatter: FormatterConfig = None
    cells: CellConfig = None
    verifier: VerifierConfig = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.formatter is None:
            self.formatter = FormatterConfig()
        if self.cells is None:
            self.cells = CellConfig()
        if self.verifier is None:
            self.verifier = VerifierConfig()


# Global configuration instance
_config: Optional[CellGraphConfig] = None


def get_config() -> CellGraphConfig:
    """
    Get the global configuration instance.

    format_value and ValueFormatter read their tokens from it when no explicit
    FormatterConfig is passed, Value.resolve reads its rebind policy from it,
    and verify_value takes its default limits from it.
    """
    global _config
    if _config is None:
        _config = CellGraphConfig()
    return _config


def set_config(config: CellGraphConfig) -> None:
    """Replace the global configuration; later renders and resolves use it."""
    global _config
    _config = config
    logger.debug(f"Configuration replaced: {config}")


def reset_config() -> None:
    """Drop the global configuration so the next lookup starts from defaults."""
    global _config
    _config = None


def setup_logging(level: str = "INFO") -> None:
    """Install a root handler so the cellgraph module loggers become visible."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
