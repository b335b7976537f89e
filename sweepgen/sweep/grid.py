"""Parameter grid for sweeps.

A grid is four ordered dimensions. The Cartesian product is walked with
``donch_n`` outermost, then ``rr_min``, ``session_filter`` and finally
``max_spread``; output files follow this order.
"""

import itertools
import logging
from pathlib import Path
from typing import Annotated, Iterator, Optional

from pydantic import BaseModel, Field, ValidationError

from sweepgen.errors import GridSpecError
from sweepgen.models import ParamSet

logger = logging.getLogger(__name__)

DEFAULT_DONCH_N = [20, 30, 40]
DEFAULT_RR_MIN = [1.8, 2.0, 2.5]
DEFAULT_SESSION_FILTER = ["london", "nyopen"]
DEFAULT_MAX_SPREAD = [2.5]


class GridSpec(BaseModel):
    """The four sweep dimensions, each a non-empty ordered list."""

    donch_n: list[Annotated[int, Field(ge=0)]] = Field(..., min_length=1)
    rr_min: list[float] = Field(..., min_length=1)
    session_filter: list[str] = Field(..., min_length=1)
    max_spread: list[float] = Field(..., min_length=1)

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def default(cls) -> "GridSpec":
        """The built-in grid used when no grid file is given."""
        return cls(
            donch_n=list(DEFAULT_DONCH_N),
            rr_min=list(DEFAULT_RR_MIN),
            session_filter=list(DEFAULT_SESSION_FILTER),
            max_spread=list(DEFAULT_MAX_SPREAD),
        )

    @property
    def size(self) -> int:
        """Number of combinations in the grid."""
        return len(self.donch_n) * len(self.rr_min) * len(self.session_filter) * len(self.max_spread)

    def combinations(self) -> Iterator[ParamSet]:
        """Yield every parameter combination in sweep order."""
        for donch_n, rr_min, session_filter, max_spread in itertools.product(
            self.donch_n, self.rr_min, self.session_filter, self.max_spread
        ):
            yield ParamSet(
                donch_n=donch_n,
                rr_min=rr_min,
                max_spread=max_spread,
                session_filter=session_filter,
            )


def load_grid(path: Path) -> GridSpec:
    """Load a grid specification from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        GridSpecError: If a field is missing or holds invalid values.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        grid = GridSpec.model_validate_json(raw)
    except ValidationError as e:
        raise GridSpecError(f"Invalid grid file {path}: {e}") from e
    logger.info("Loaded grid from %s (%d combinations)", path, grid.size)
    return grid


def resolve_grid(grid_file: Optional[Path] = None) -> GridSpec:
    """Return the grid from ``grid_file`` if given, else the default grid.

    A grid file replaces all four dimensions; nothing is merged with the
    defaults.
    """
    if grid_file is not None:
        return load_grid(grid_file)
    return GridSpec.default()
