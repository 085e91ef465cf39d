"""
Recording Renderer - No-op renderer that remembers every command
"""

from typing import Any, List, Optional, Set, Tuple, TYPE_CHECKING

from .interfaces import IRenderer, check_fraction

if TYPE_CHECKING:
    from game_system.cell import Cell


class RecordingRenderer(IRenderer):
    """
    Renderer that draws nothing and records what it was asked to draw.

    Used for headless runs and tests. Besides the raw call log it keeps the
    same display state a real renderer would show (flashed tiles, hover,
    progress, overlay) so assertions can look at either.
    """

    def __init__(self, logger=None):
        """
        Args:
            logger: Optional ClassLogger; commands are logged at DEBUG
        """
        self.logger = logger
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.flashed: Set['Cell'] = set()
        self.hovered: Optional['Cell'] = None
        self.progress: float = 0.0
        self.game_over: Optional[Tuple[str, int]] = None
        self.frames = 0
        self.cleaned_up = False

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.logger:
            self.logger.debug(f"{name}{args}")

    def render_grid(self) -> None:
        self._record("render_grid")
        self.flashed.clear()
        self.hovered = None

    def flash_tile(self, cell: 'Cell') -> None:
        self._record("flash_tile", cell)
        self.flashed.add(cell)

    def unflash_tile(self, cell: 'Cell') -> None:
        self._record("unflash_tile", cell)
        self.flashed.discard(cell)

    def highlight_hover(self, cell: Optional['Cell']) -> None:
        self._record("highlight_hover", cell)
        self.hovered = cell

    def update_progress(self, fraction: float) -> None:
        self.progress = check_fraction(fraction)
        self._record("update_progress", fraction)

    def show_game_over(self, message: str, final_score: int) -> None:
        self._record("show_game_over", message, final_score)
        self.game_over = (message, final_score)

    def hide_game_over(self) -> None:
        self._record("hide_game_over")
        self.game_over = None

    def present(self) -> None:
        self.frames += 1

    def cleanup(self) -> None:
        self.cleaned_up = True

    def calls_named(self, name: str) -> List[Tuple[Any, ...]]:
        """Arguments of every recorded call with the given name"""
        return [args for call_name, args in self.calls if call_name == name]

    def clear(self) -> None:
        """Forget recorded calls (display state is kept)"""
        self.calls.clear()
