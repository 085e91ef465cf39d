#!/usr/bin/env python3
"""
Tile Memory Game

Main application for the tile memory game: the board flashes a growing
sequence of tiles and the player repeats it before the countdown runs out.
Provides a state-machine-based round engine with a pygame window.
"""

import sys
import logging
import signal

try:
    from display_system.pygame_renderer import PygameRenderer
    from game_system import GameManager
    from game_system.config import GameConfig, GridConfig, TimingConfig, DifficultyConfig, DisplayConfig
    from input_system.pygame_input import PygameInputReader
    from utils import HybridLogger
except ImportError as e:
    import traceback
    print(f"❌ Import error: {e}")
    print("\nFull traceback:")
    traceback.print_exc()
    print("\nMake sure required libraries are installed (pip install -e .)")
    sys.exit(1)


def create_default_config() -> GameConfig:
    """Create the default configuration (4x4 board, 10 rounds)"""
    return GameConfig(
        grid=GridConfig(rows=4, cols=4),
        timing=TimingConfig(
            flash_duration_ms=300,
            gap_ms=150,
            post_delay_ms=500,
            round_start_delay_ms=800,
            round_pacing_delay_ms=1000,
        ),
        difficulty=DifficultyConfig(
            max_sequence_length=10,
            base_time_limit_s=1.0,
            time_increment_s=1.0,
        ),
        display=DisplayConfig(width=600, height=600, progress_bar_height=20),
        frame_duration_ms=1000 / 60,  # 60 FPS
    )


def create_game_system(config: GameConfig, game_logger) -> GameManager:
    """
    Create and configure the complete game system using provided config.

    Args:
        config: GameConfig instance with all system configuration
        game_logger: ClassLogger instance for logging initialization steps

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    game_manager_logger = game_logger.create_class_logger("GameManager", logging.INFO)
    renderer_logger = game_logger.create_class_logger("PygameRenderer", logging.INFO)
    input_logger = game_logger.create_class_logger("PygameInputReader", logging.INFO)

    try:
        renderer = PygameRenderer(config=config, logger=renderer_logger)
        input_reader = PygameInputReader(renderer=renderer, logger=input_logger)

        game_manager = GameManager(
            config=config,
            renderer=renderer,
            input_reader=input_reader,
            logger=game_manager_logger,
        )

        game_logger.info("Tile memory game initialized successfully")
        return game_manager

    except Exception as e:
        game_logger.error(f"Failed to initialize tile memory game: {e}", exception=e)
        raise


def install_signal_handlers(game_logger) -> None:
    """Flush the log before the process is terminated"""

    def emergency_flush_and_exit(sig, frame):
        game_logger.critical(f"⚠️  SIGNAL RECEIVED: {sig} - Process terminating")
        game_logger.flush()
        sys.exit(1)

    signal.signal(signal.SIGTERM, emergency_flush_and_exit)
    if hasattr(signal, "SIGHUP"):
        signal.signal(signal.SIGHUP, emergency_flush_and_exit)


def main():
    """
    Main function - sets up and runs the tile memory game.
    """
    main_logger = HybridLogger("TileMemory")
    game_logger = main_logger.get_class_logger("TileMemory")
    install_signal_handlers(game_logger)

    game_logger.info("🧠 TILE MEMORY GAME")

    config = create_default_config()

    game_logger.info(f"Board: {config.grid.rows}x{config.grid.cols}, {config.difficulty.max_sequence_length} rounds to win")
    game_logger.info(
        f"Timing: flash {config.timing.flash_duration_ms}ms, gap {config.timing.gap_ms}ms, "
        f"time limit {config.difficulty.base_time_limit_s:.0f}s + {config.difficulty.time_increment_s:.0f}s per round"
    )
    game_logger.info(f"Game settings: {config.frame_duration_ms:.1f}ms frame duration ({config.target_fps:.1f} FPS)")

    try:
        game_manager = create_game_system(config, game_logger)

        game_logger.info("🚀 Press Start (or Space) to play")
        game_manager.run_game_loop()

    except KeyboardInterrupt:
        game_logger.info("⏹️  Tile memory game stopped by user")
        game_logger.flush()

    finally:
        game_logger.info("Tile memory game exited")
        main_logger.cleanup()


if __name__ == "__main__":
    main()
