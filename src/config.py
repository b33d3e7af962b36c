"""Configuration for replaying a board from a YAML file."""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field

from .board import Entry, parse_board, board_extent


class BoardConfig(BaseModel):
    """
    A board to replay, plus the limits used to search it.

    Entries can be listed explicitly, given in board notation, or both
    (explicit entries are placed first).
    """
    max_extent: Optional[int] = Field(None, ge=0)
    max_word_length: int = Field(15, ge=1)
    board: Optional[str] = None
    entries: List[Entry] = Field(default_factory=list)

    def resolved_entries(self) -> List[Entry]:
        """
        All entries to place, in order.

        Raises:
            ValueError: If the board notation has errors
        """
        entries = list(self.entries)
        if self.board:
            parsed, errors = parse_board(self.board)
            if errors:
                raise ValueError(f"Board notation errors: {[e.message for e in errors]}")
            entries.extend(parsed)
        return entries

    def grid_size(self) -> int:
        """Size to allocate: the configured extent, or whatever the entries need."""
        if self.max_extent is not None:
            return self.max_extent
        return board_extent(self.resolved_entries()) + self.max_word_length

    @property
    def sweep_length(self) -> int:
        """Candidate sweep limit: the longest word plus one."""
        return self.max_word_length + 1


def load_config(config_path: str) -> BoardConfig:
    """Load a board configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return BoardConfig(**data)
