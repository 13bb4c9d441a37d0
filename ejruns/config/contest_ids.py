"""Collect contest IDs from a comma list, a file and a judges directory."""

from pathlib import Path
from typing import List, Optional

from ..client.exceptions import ContestIdError


def _parse_id(token: str, where: str = "") -> int:
    try:
        return int(token)
    except ValueError as e:
        suffix = f" in {where}" if where else ""
        raise ContestIdError(f"invalid contest id {token!r}{suffix}") from e


def parse_contest_ids(
    comma_separated: str = "",
    file_path: Optional[Path] = None,
    dir_path: Optional[Path] = None,
) -> List[int]:
    """
    Merge contest IDs from all given sources.
    Sources are read in order (list, file, directory); duplicates keep
    their first position.
    """
    ids: List[int] = []
    seen = set()

    def add_id(contest_id: int):
        if contest_id not in seen:
            seen.add(contest_id)
            ids.append(contest_id)

    if comma_separated:
        for token in comma_separated.split(","):
            token = token.strip()
            if not token:
                continue
            add_id(_parse_id(token))

    if file_path is not None:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise ContestIdError(f"open contest file: {e}") from e

        for line in lines:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            add_id(_parse_id(line, str(file_path)))

    if dir_path is not None:
        try:
            entries = sorted(Path(dir_path).iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ContestIdError(f"read contest dir: {e}") from e

        # Judge directories are named by bare contest number
        for entry in entries:
            name = entry.name
            if not entry.is_dir() or not name.isascii() or not name.isdigit():
                continue
            add_id(int(name))

    if not ids:
        raise ContestIdError(
            "no contest ids provided; use --contests, --contest-file, or --contest-dir"
        )
    return ids
