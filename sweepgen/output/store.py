"""Line-delimited JSON store for sweep candidates."""

import logging
from pathlib import Path
from typing import Iterable, Sequence

from sweepgen.models import Candidate
from sweepgen.sweep.ranking import top_candidates

logger = logging.getLogger(__name__)

DEFAULT_OUT_DIR = Path("./out")
CANDIDATES_FILE = "candidates.jsonl"
TOP_CANDIDATES_FILE = "top_candidates.jsonl"


def _write_jsonl(path: Path, candidates: Iterable[Candidate]) -> int:
    count = 0
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        for candidate in candidates:
            f.write(candidate.to_json())
            f.write("\n")
            count += 1
    return count


def read_candidates(path: Path) -> list[Candidate]:
    """Read candidates back from a JSONL file, skipping blank lines."""
    candidates = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                candidates.append(Candidate.model_validate_json(line))
    return candidates


class CandidateStore:
    """Writes the full and top-K candidate files into an output directory.

    The two files are written independently; a failure while writing one
    does not affect the other.
    """

    def __init__(self, out_dir: Path = DEFAULT_OUT_DIR):
        """Initialize the store.

        Args:
            out_dir: Directory for output files. Created on first write.
        """
        self.out_dir = Path(out_dir)

    @property
    def candidates_path(self) -> Path:
        return self.out_dir / CANDIDATES_FILE

    @property
    def top_candidates_path(self) -> Path:
        return self.out_dir / TOP_CANDIDATES_FILE

    def _ensure_out_dir(self) -> None:
        """Ensure the output directory exists."""
        self.out_dir.mkdir(parents=True, exist_ok=True)

    def write_all(self, candidates: Sequence[Candidate]) -> Path:
        """Write every candidate, in the given order.

        Returns:
            Path of the written file.
        """
        self._ensure_out_dir()
        count = _write_jsonl(self.candidates_path, candidates)
        logger.info("Wrote %d candidates to %s", count, self.candidates_path)
        return self.candidates_path

    def write_top(self, candidates: Sequence[Candidate], k: int) -> int:
        """Rank candidates and write the best ``k``.

        Returns:
            Number of candidates written, ``min(k, len(candidates))``.
        """
        self._ensure_out_dir()
        kept = _write_jsonl(self.top_candidates_path, top_candidates(candidates, k))
        logger.info("Wrote top %d candidates to %s", kept, self.top_candidates_path)
        return kept

    def read_all(self) -> list[Candidate]:
        """Read the full candidate file."""
        return read_candidates(self.candidates_path)

    def read_top(self) -> list[Candidate]:
        """Read the top candidate file."""
        return read_candidates(self.top_candidates_path)
