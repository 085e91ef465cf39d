import logging
import os
import random
from typing import Callable, List

import pytest

# Headless pygame for the renderer tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from display_system import RecordingRenderer
from game_system import GameConfig, GameManager, RoundState
from input_system import IInputReader, InputEvent
from utils import HybridLogger


class FakeTime:
    """Virtual time source in seconds, advanced by hand in whole milliseconds"""

    def __init__(self, start_s: float = 1000.0):
        self._ms = int(start_s * 1000)

    def __call__(self) -> float:
        return self._ms / 1000.0

    def advance(self, ms: int) -> None:
        self._ms += int(ms)


class ScriptedInputReader(IInputReader):
    """Input reader fed by the test"""

    def __init__(self):
        self.pending: List[InputEvent] = []
        self.cleaned_up = False

    def push(self, *events: InputEvent) -> None:
        self.pending.extend(events)

    def read_events(self) -> List[InputEvent]:
        events, self.pending = self.pending, []
        return events

    def cleanup(self) -> None:
        self.cleaned_up = True


class GameDriver:
    """Steps a GameManager on virtual time, one frame per step"""

    def __init__(self, manager: GameManager, fake_time: FakeTime, input_reader: ScriptedInputReader):
        self.manager = manager
        self.fake_time = fake_time
        self.input_reader = input_reader

    @property
    def session(self):
        return self.manager.session

    def start(self) -> None:
        self.input_reader.push(InputEvent.start_pressed())
        self.manager.update()

    def step(self, ms: int = 5) -> None:
        self.fake_time.advance(ms)
        self.manager.update()

    def advance(self, ms: int, step_ms: int = 5) -> None:
        for _ in range(ms // step_ms):
            self.step(step_ms)

    def run_until(self, predicate: Callable[[], bool], timeout_ms: int = 30000, step_ms: int = 5) -> int:
        """Step until predicate holds; returns the virtual milliseconds it took"""
        elapsed = 0
        while not predicate():
            if elapsed >= timeout_ms:
                raise AssertionError(f"Condition not reached within {timeout_ms}ms "
                                     f"(state {self.manager.get_current_state_name()})")
            self.step(step_ms)
            elapsed += step_ms
        return elapsed

    def wait_for_input(self, timeout_ms: int = 30000) -> int:
        if self.manager.round_state is RoundState.IDLE:
            self.start()
        return self.run_until(lambda: self.manager.round_state is RoundState.AWAITING_INPUT, timeout_ms)

    def tap(self, cell) -> None:
        self.input_reader.push(InputEvent.tile_click(cell))
        self.manager.update()

    def play_round(self) -> None:
        """Wait for the input phase and tap the whole sequence back"""
        self.wait_for_input()
        for cell in list(self.session.sequence):
            self.tap(cell)


@pytest.fixture()
def fake_time():
    return FakeTime()


@pytest.fixture()
def hybrid_logger(tmp_path):
    main_logger = HybridLogger("TileMemoryTest", log_dir=str(tmp_path / "logs"))
    yield main_logger
    main_logger.cleanup()


@pytest.fixture()
def logger(hybrid_logger):
    return hybrid_logger.get_class_logger("Test", logging.DEBUG)


@pytest.fixture()
def config():
    return GameConfig()


@pytest.fixture()
def renderer():
    return RecordingRenderer()


@pytest.fixture()
def input_reader():
    return ScriptedInputReader()


@pytest.fixture()
def manager(config, renderer, input_reader, logger, fake_time):
    return GameManager(
        config=config,
        renderer=renderer,
        input_reader=input_reader,
        logger=logger,
        time_source=fake_time,
        rng=random.Random(1234),
    )


@pytest.fixture()
def game(manager, fake_time, input_reader):
    return GameDriver(manager, fake_time, input_reader)
