"""Static game configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True)
class GameConfig:
    """Grid geometry, timing and palette for a single game.

    ``start_x`` / ``start_y`` default to a quarter of the way across and
    halfway down the grid.
    """

    grid_width: int = 32
    grid_height: int = 32
    cell_width: int = 16
    cell_height: int = 16
    fps: int = 20

    start_x: int | None = None
    start_y: int | None = None

    # Palette
    snake_color: Color = (0, 255, 0)
    food_color: Color = (255, 0, 0)
    background_color: Color = (0, 0, 0)

    title: str = "viper"

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must be at least 1.")
        if self.cell_width < 1 or self.cell_height < 1:
            raise ValueError("cell_width and cell_height must be at least 1.")
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        x, y = self.start
        if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
            raise ValueError(
                f"start position ({x}, {y}) lies outside the "
                f"{self.grid_width}x{self.grid_height} grid."
            )

    @property
    def start(self) -> tuple[int, int]:
        """Snake head position at game start."""
        x = self.grid_width // 4 if self.start_x is None else self.start_x
        y = self.grid_height // 2 if self.start_y is None else self.start_y
        return x, y

    @property
    def screen_size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return (
            self.grid_width * self.cell_width,
            self.grid_height * self.cell_height,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples stay tuples)."""
        return asdict(self)
