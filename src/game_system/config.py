"""
Game system configuration
"""

from dataclasses import dataclass, field
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class GridConfig:
    """Board geometry"""
    rows: int = 4
    cols: int = 4


@dataclass
class TimingConfig:
    """Playback and pacing timings, all in milliseconds"""
    flash_duration_ms: int = 300
    gap_ms: int = 150
    post_delay_ms: int = 500
    round_start_delay_ms: int = 800   # lead-in before playback starts
    round_pacing_delay_ms: int = 1000  # pause after a completed round
    tick_interval_ms: float = 1000 / 60  # countdown check, ~60Hz

    @property
    def flash_step_ms(self) -> int:
        """Time between the starts of two consecutive flashes"""
        return self.flash_duration_ms + self.gap_ms


@dataclass
class DifficultyConfig:
    """Linear difficulty ramp"""
    max_sequence_length: int = 10
    base_time_limit_s: float = 1.0
    time_increment_s: float = 1.0

    def time_limit_for(self, sequence_length: int) -> float:
        """Seconds allowed for input when the sequence has the given length"""
        return self.base_time_limit_s + (sequence_length - 1) * self.time_increment_s


@dataclass
class DisplayConfig:
    """Window layout and palette for the pygame front end"""
    width: int = 600
    height: int = 600
    progress_bar_height: int = 20
    border_width: int = 2
    tile_color: Color = (0, 100, 0)
    flash_color: Color = (0, 255, 0)
    hover_color: Color = (0, 77, 0)
    border_color: Color = (0, 0, 0)
    progress_color: Color = (255, 0, 0)
    background_color: Color = (0, 0, 0)
    text_color: Color = (255, 255, 255)
    window_title: str = "Tile Memory"


@dataclass
class GameConfig:
    """Main game system configuration"""

    grid: GridConfig = field(default_factory=GridConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    difficulty: DifficultyConfig = field(default_factory=DifficultyConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # Frame loop
    frame_duration_ms: float = 1000 / 60

    @property
    def tile_count(self) -> int:
        """Number of tiles on the board"""
        return self.grid.rows * self.grid.cols

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.grid.rows <= 0 or self.grid.cols <= 0:
            raise ValueError(f"Grid must have positive size, got {self.grid.rows}x{self.grid.cols}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.timing.tick_interval_ms <= 0:
            raise ValueError("Tick interval must be positive")

        for name in ("flash_duration_ms", "gap_ms", "post_delay_ms",
                     "round_start_delay_ms", "round_pacing_delay_ms"):
            value = getattr(self.timing, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

        if self.difficulty.max_sequence_length < 1:
            raise ValueError(
                f"Max sequence length must be at least 1, got {self.difficulty.max_sequence_length}"
            )

        if self.difficulty.base_time_limit_s <= 0:
            raise ValueError("Base time limit must be positive")

        if self.difficulty.time_increment_s < 0:
            raise ValueError("Time increment must not be negative")

        if self.display.width < self.grid.cols or self.display.height < self.grid.rows:
            raise ValueError(
                f"Display {self.display.width}x{self.display.height} too small for "
                f"{self.grid.rows}x{self.grid.cols} grid"
            )
