"""Grid data structure for the Game of Life engine."""

from typing import Tuple
import numpy as np
import torch
import torch.nn.functional as F


# 3x3 Moore neighbourhood, centre excluded
_NEIGHBOR_KERNEL = (
    torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
)

_NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]

# Ages are stored as int32 and saturate here
MAX_AGE = int(np.iinfo(np.int32).max)


class Grid:
    """Represents a bounded 2D grid of cell ages.

    Each cell holds a non-negative age: 0 is dead, N > 0 means the cell
    has been alive for N consecutive generations. Cells are addressed by
    (row, col) and stored row-major in a numpy array of shape
    (height, width). Edges never wrap.
    """

    def __init__(self, width: int, height: int, track_age: bool = True) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows
            track_age: Whether live cells accumulate age. When False the
                grid follows the boolean convention and live cells are 1.

        Raises:
            ValueError: If either dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")

        self._width = width
        self._height = height
        self.track_age = track_age
        self._cells = np.zeros((height, width), dtype=np.int32)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self._height, self._width)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell ages."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def is_empty(self) -> bool:
        """Whether the grid has zero rows or zero columns."""
        return self._width == 0 or self._height == 0

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self._height}x{self._width} grid")

    def get_cell(self, row: int, col: int) -> int:
        """Get the age of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Cell age (0 if dead)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return int(self._cells[row, col])

    def is_alive(self, row: int, col: int) -> bool:
        """Check whether a cell is alive."""
        return self.get_cell(row, col) > 0

    def set_cell(self, row: int, col: int, age: int = 1) -> None:
        """Set the age of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            age: New age, 0 for dead. Booleans are accepted.

        Raises:
            IndexError: If coordinates are out of bounds
            ValueError: If age is negative or above MAX_AGE
        """
        self._check_bounds(row, col)
        age = int(age)
        if not 0 <= age <= MAX_AGE:
            raise ValueError(f"Cell age must be between 0 and {MAX_AGE}, got {age}")
        if not self.track_age:
            age = min(age, 1)
        self._cells[row, col] = age

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(0)

    def alive_mask(self) -> np.ndarray:
        """Boolean array that is True where a cell is alive."""
        return self._cells > 0

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def oldest_age(self) -> int:
        """Age of the oldest living cell (0 when nothing lives)."""
        if self.is_empty:
            return 0
        return int(self._cells.max())

    def count_living_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Positions outside the grid contribute nothing.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr, dc in _NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self._height and 0 <= nc < self._width and self._cells[nr, nc] > 0:
                count += 1
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch convolution.

        Zero padding keeps the edges bounded.

        Returns:
            Array of shape (height, width) with neighbor counts
        """
        if self.is_empty:
            return np.zeros(self.shape, dtype=np.int8)

        alive = torch.from_numpy(self.alive_mask().astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(alive, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].round().numpy().astype(np.int8)

    def copy(self) -> "Grid":
        """Return an independent grid with the same dimensions and cells."""
        other = Grid(self._width, self._height, track_age=self.track_age)
        other._cells[:] = self._cells
        return other

    def from_list(self, data: list) -> None:
        """Load cell ages from a nested list.

        Args:
            data: One inner list per row

        Raises:
            ValueError: If data dimensions don't match grid or ages fall outside 0..MAX_AGE
        """
        arr = np.array(data, dtype=np.int64)
        if arr.size == 0 and self.is_empty:
            arr = arr.reshape(self.shape)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")
        if (arr < 0).any() or (arr > MAX_AGE).any():
            raise ValueError(f"Cell ages must be between 0 and {MAX_AGE}")
        if not self.track_age:
            arr = np.minimum(arr, 1)

        self._cells[:] = arr

    @classmethod
    def from_array(cls, cells: np.ndarray, track_age: bool = True) -> "Grid":
        """Build a grid around a (height, width) array of ages.

        The array is copied.

        Raises:
            ValueError: If the array is not 2D or holds negative ages
        """
        if np.ndim(cells) != 2:
            raise ValueError(f"Expected a 2D array, got {np.ndim(cells)} dimensions")
        height, width = np.shape(cells)
        grid = cls(width, height, track_age=track_age)
        grid.from_list(np.asarray(cells))
        return grid

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return (
            self.shape == other.shape
            and self.track_age == other.track_age
            and np.array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if age else "." for age in row) for row in self._cells)


def create(width: int, height: int, track_age: bool = True) -> Grid:
    """Allocate a grid of fixed dimensions with every cell dead."""
    return Grid(width, height, track_age=track_age)
