import pytest

from game_system import (
    Cell,
    GAME_OVER_MESSAGE,
    WIN_MESSAGE,
    RoundState,
)
from input_system import InputEvent


def wrong_cell(cell):
    return Cell((cell.row + 1) % 4, cell.col)


def test_manager_starts_idle(manager, renderer):
    assert manager.round_state is RoundState.IDLE
    assert manager.get_current_state_name() == "IdleState"
    assert renderer.calls_named("render_grid")
    assert manager.session.sequence == []
    assert manager.session.score == 0


def test_start_grows_sequence_and_enters_playback(game, renderer):
    game.start()

    session = game.session
    assert session.round_state is RoundState.PLAYBACK
    assert len(session.sequence) == 1
    assert session.score == 1
    assert session.current_time_limit == 1.0
    assert renderer.calls_named("hide_game_over")


def test_first_round_playback_timing(game, renderer):
    game.start()

    lead_in = game.run_until(lambda: renderer.calls_named("flash_tile"), step_ms=1)
    assert 800 <= lead_in <= 801
    assert renderer.calls_named("flash_tile") == [(game.session.sequence[0],)]

    flash_on = game.run_until(lambda: renderer.calls_named("unflash_tile"), step_ms=1)
    assert 299 <= flash_on <= 301

    until_done = game.run_until(lambda: game.manager.round_state is RoundState.AWAITING_INPUT, step_ms=1)
    # done event at 300 + 150 + 500 = 950ms after playback start
    assert 948 <= flash_on + until_done <= 952

    assert len(renderer.calls_named("flash_tile")) == 1
    assert game.manager.clock.is_running
    assert game.session.player_input == []
    assert game.session.deadline == pytest.approx(game.manager.clock.started_at + 1.0)


def test_taps_during_playback_are_ignored(game):
    game.start()
    game.advance(100)

    game.tap(Cell(0, 0))

    assert game.session.round_state is RoundState.PLAYBACK
    assert game.session.player_input == []


def test_correct_taps_complete_round(game, renderer):
    game.play_round()

    assert game.session.round_state is RoundState.ROUND_COMPLETE
    assert not game.manager.clock.is_running
    assert renderer.game_over is None

    game.run_until(lambda: game.session.round_state is RoundState.PLAYBACK)
    assert game.session.score == 2
    assert len(game.session.sequence) == 2
    assert game.session.current_time_limit == 2.0


def test_round_pacing_delay_before_next_round(game):
    game.play_round()

    waited = game.run_until(lambda: game.session.round_state is RoundState.PLAYBACK, step_ms=1)

    assert 999 <= waited <= 1001


def test_wrong_tap_ends_game(game, renderer):
    game.wait_for_input()

    game.tap(wrong_cell(game.session.sequence[0]))

    assert game.session.round_state is RoundState.GAME_OVER
    assert renderer.game_over == (GAME_OVER_MESSAGE, 1)
    assert game.session.final_score == 1
    assert game.session.game_over_message == GAME_OVER_MESSAGE


def test_wrong_tap_mid_sequence_keeps_reached_score(game, renderer):
    game.play_round()
    game.wait_for_input()
    sequence = game.session.sequence

    game.tap(sequence[0])
    game.tap(wrong_cell(sequence[1]))

    assert game.session.round_state is RoundState.GAME_OVER
    assert renderer.game_over == (GAME_OVER_MESSAGE, 2)


def test_countdown_expiry_ends_game(game, renderer):
    game.wait_for_input()

    waited = game.run_until(lambda: game.session.round_state is RoundState.GAME_OVER, step_ms=1)

    assert 1000 <= waited <= 1040
    assert renderer.game_over == (GAME_OVER_MESSAGE, 1)
    assert renderer.progress == 0.0


def test_countdown_expiry_with_partial_input(game, renderer):
    game.play_round()
    game.wait_for_input()
    game.tap(game.session.sequence[0])

    game.advance(2100)

    assert game.session.round_state is RoundState.GAME_OVER
    assert game.session.player_input == game.session.sequence[:1]
    assert renderer.game_over == (GAME_OVER_MESSAGE, 2)


def test_progress_bar_counts_down(game, renderer):
    game.wait_for_input()
    game.advance(500)

    assert 0.4 < renderer.progress < 0.6


def test_final_tap_in_expiry_frame_completes_round(game, fake_time, input_reader):
    game.wait_for_input()
    cell = game.session.sequence[0]

    fake_time.advance(1000)
    input_reader.push(InputEvent.tile_click(cell))
    game.manager.update()

    assert game.session.round_state is RoundState.ROUND_COMPLETE


def test_tick_checks_completion_before_expiry(game, fake_time):
    game.wait_for_input()
    game.session.player_input = list(game.session.sequence)

    fake_time.advance(5000)
    game.manager.tick()

    assert game.session.round_state is RoundState.ROUND_COMPLETE


def test_full_sequence_wins_with_congrats(game, renderer, config):
    for _ in range(config.difficulty.max_sequence_length):
        game.play_round()

    game.run_until(lambda: game.session.round_state is RoundState.GAME_OVER)

    assert len(game.session.sequence) == 10
    assert renderer.game_over == (WIN_MESSAGE, 10)
    assert game.session.final_score == 10


def test_time_limit_grows_each_round(game):
    limits = []
    for _ in range(3):
        game.wait_for_input()
        limits.append(game.session.current_time_limit)
        for cell in list(game.session.sequence):
            game.tap(cell)

    assert limits == [1.0, 2.0, 3.0]


def test_no_side_effects_after_game_over(game, renderer):
    game.wait_for_input()
    game.tap(wrong_cell(game.session.sequence[0]))
    renderer.clear()

    game.advance(5000)

    assert renderer.calls == []
    assert game.manager.task_queue.pending_count() == 0
    assert game.session.round_state is RoundState.GAME_OVER


def test_restart_mid_playback_drops_old_callbacks(game, renderer):
    game.start()
    game.advance(850)
    assert len(renderer.calls_named("flash_tile")) == 1
    old_generation = game.session.generation

    game.start()
    renderer.clear()
    game.advance(3000)

    assert game.session.generation != old_generation
    assert len(game.session.sequence) == 1
    # Only the new session's single flash shows up
    assert renderer.calls_named("flash_tile") == [(game.session.sequence[0],)]
    assert len(renderer.calls_named("unflash_tile")) == 1
    assert game.session.round_state is RoundState.GAME_OVER


def test_restart_after_game_over_resets_session(game, renderer):
    game.wait_for_input()
    game.tap(wrong_cell(game.session.sequence[0]))

    game.start()

    assert renderer.game_over is None
    assert game.session.final_score is None
    assert game.session.score == 1
    assert len(game.session.sequence) == 1
    assert game.session.round_state is RoundState.PLAYBACK


def test_hover_only_while_awaiting_input(game, renderer):
    game.start()
    game.manager.on_pointer_move(Cell(1, 1))
    assert renderer.hovered is None

    game.wait_for_input()
    game.manager.on_pointer_move(Cell(1, 1))
    assert renderer.hovered == Cell(1, 1)

    game.manager.on_pointer_move(None)
    assert renderer.hovered is None


def test_tap_clears_hover(game, renderer):
    game.wait_for_input()
    game.manager.on_pointer_move(Cell(2, 2))

    game.tap(game.session.sequence[0])

    assert renderer.hovered is None


def test_click_outside_grid_is_rejected(manager):
    with pytest.raises(ValueError):
        manager.on_tile_click(Cell(4, 0))


def test_quit_event_ends_game_loop(manager, input_reader, renderer):
    input_reader.push(InputEvent.quit())

    manager.run_game_loop()

    assert manager.running is False
    assert input_reader.cleaned_up
    assert renderer.cleaned_up


def test_game_loop_errors_are_raised_after_cleanup(manager, input_reader, renderer):
    def broken_read():
        raise RuntimeError("input device lost")

    input_reader.read_events = broken_read

    with pytest.raises(RuntimeError):
        manager.run_game_loop()

    assert renderer.cleaned_up


def test_hover_restored_when_input_phase_starts(game, renderer):
    game.start()
    game.advance(100)
    game.manager.on_pointer_move(Cell(2, 3))
    assert renderer.hovered is None

    game.wait_for_input()

    assert renderer.hovered == Cell(2, 3)


def test_pointer_leaving_board_during_playback_clears_hover(game, renderer):
    game.start()
    game.manager.on_pointer_move(Cell(2, 3))
    game.manager.on_pointer_move(None)

    game.wait_for_input()

    assert renderer.hovered is None


def test_game_over_retags_session_with_queue_generation(game):
    game.wait_for_input()
    game.tap(wrong_cell(game.session.sequence[0]))

    assert game.session.round_state is RoundState.GAME_OVER
    assert game.session.generation == game.manager.task_queue.generation


def test_start_from_idle_does_not_reenter_idle(manager, renderer, input_reader):
    input_reader.push(InputEvent.start_pressed())
    manager.update()

    assert len(renderer.calls_named("render_grid")) == 1
    assert manager.get_current_state_name() == "PlaybackState"
