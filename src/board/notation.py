"""
Board notation parsing.

Boards can be written the way players describe them:

    SCURRIES H
    NINES[4] @ SCURRIES[0] V
    RUNES[2] @ NINES[0] H

The first line is the root word and its direction; the root starts at the
origin. Every following line attaches ``WORD`` so that its letter ``j``
sits on letter ``i`` of an earlier ``TARGET``. The text may be wrapped in
``<board>...</board>`` tags.
"""

import re
from typing import Dict, List, Tuple

from .models import Entry, NotationError, Orientation


ROOT_PATTERN = r'^([A-Z]+)\s+([HV])$'
LINE_PATTERN = r'^([A-Z]+)\[(\d+)\]\s*@\s*([A-Z]+)\[(\d+)\]\s+([HV])$'


def extract_board_content(spec: str) -> str:
    """Extract content from between <board> and </board> tags."""
    match = re.search(r'<board>(.*?)</board>', spec, re.DOTALL)
    if match:
        return match.group(1).strip()
    return spec.strip()


def parse_board(spec: str) -> Tuple[List[Entry], List[NotationError]]:
    """
    Parse a board into positioned entries, collecting errors as it goes.

    Lines that cannot be placed are reported and skipped; the remaining
    entries are still returned.
    """
    spec = extract_board_content(spec)
    lines = [line.strip() for line in spec.split('\n') if line.strip()]

    errors: List[NotationError] = []
    entries: List[Entry] = []

    if not lines:
        errors.append(NotationError(
            code="EMPTY_BOARD",
            message="Board specification is empty"
        ))
        return entries, errors

    root_match = re.match(ROOT_PATTERN, lines[0], re.IGNORECASE)
    if not root_match:
        errors.append(NotationError(
            code="INVALID_ROOT",
            message=f"Invalid root line format: '{lines[0]}'",
            line=1
        ))
        return entries, errors

    root = Entry(root_match.group(1).upper(), Orientation(root_match.group(2).upper()), (0, 0))
    entries.append(root)
    placed: Dict[str, Entry] = {root.text: root}

    for i, line in enumerate(lines[1:], start=2):
        match = re.match(LINE_PATTERN, line, re.IGNORECASE)
        if not match:
            errors.append(NotationError(
                code="INVALID_LINE",
                message=f"Invalid line format: '{line}'",
                line=i
            ))
            continue

        word = match.group(1).upper()
        word_idx = int(match.group(2))
        target = match.group(3).upper()
        target_idx = int(match.group(4))
        orientation = Orientation(match.group(5).upper())

        if target not in placed:
            errors.append(NotationError(
                code="TARGET_NOT_FOUND",
                message=f"Target word '{target}' not placed before '{word}'",
                word=word,
                line=i
            ))
            continue

        if target_idx >= len(target):
            errors.append(NotationError(
                code="TARGET_INDEX_OOB",
                message=f"Target index {target_idx} out of bounds for '{target}' (length {len(target)})",
                word=word,
                line=i
            ))
            continue

        if word_idx >= len(word):
            errors.append(NotationError(
                code="WORD_INDEX_OOB",
                message=f"Word index {word_idx} out of bounds for '{word}' (length {len(word)})",
                word=word,
                line=i
            ))
            continue

        # Shared letter in the target, then back up to where the new word starts
        target_entry = placed[target]
        shared = target_entry.start.shift(target_entry.orientation.step, target_idx)
        start = shared.shift(orientation.step, -word_idx)

        entry = Entry(word, orientation, start)
        entries.append(entry)
        placed[word] = entry

    return entries, errors


def board_extent(entries: List[Entry]) -> int:
    """Largest absolute coordinate reached by any entry."""
    extent = 0
    for entry in entries:
        for y, x in (entry.start, entry.end):
            extent = max(extent, abs(y), abs(x))
    return extent
