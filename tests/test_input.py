import pygame

from chip8.input import InputState, poll_input


def key_down(scancode):
    return pygame.event.Event(pygame.KEYDOWN, scancode=scancode, key=0, mod=0)


def key_up(scancode):
    return pygame.event.Event(pygame.KEYUP, scancode=scancode, key=0, mod=0)


def test_default_state():
    state = InputState()
    assert state.running is True
    assert state.keys == set()
    assert (state.left, state.right) == (False, False)


def test_key_press_and_release():
    state = poll_input(InputState(), [key_down(4)])
    assert 4 in state.keys
    poll_input(state, [key_up(4)])
    assert 4 not in state.keys


def test_escape_stops_without_recording_key():
    state = poll_input(InputState(), [key_down(pygame.KSCAN_ESCAPE)])
    assert state.running is False
    assert pygame.KSCAN_ESCAPE not in state.keys


def test_out_of_range_scancode_ignored():
    state = poll_input(InputState(), [key_down(300)])
    assert state.keys == set()
    assert state.running is True


def test_quit_event_stops():
    state = poll_input(InputState(), [pygame.event.Event(pygame.QUIT)])
    assert state.running is False


def test_mouse_motion_records_position():
    state = poll_input(InputState(), [pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20))])
    assert (state.mouse_x, state.mouse_y) == (10, 20)


def test_mouse_buttons():
    state = InputState()
    poll_input(
        state,
        [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(0, 0)),
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_RIGHT, pos=(0, 0)),
        ],
    )
    assert (state.left, state.right) == (True, True)
    poll_input(
        state,
        [pygame.event.Event(pygame.MOUSEBUTTONUP, button=pygame.BUTTON_LEFT, pos=(0, 0))],
    )
    assert (state.left, state.right) == (False, True)


def test_middle_button_ignored():
    state = poll_input(
        InputState(),
        [pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_MIDDLE, pos=(0, 0))],
    )
    assert (state.left, state.right) == (False, False)


def test_poll_input_returns_same_state():
    state = InputState()
    result = poll_input(state, [key_down(7), key_down(9)])
    assert result is state
    assert result.keys == {7, 9}


def test_handle_applies_single_event():
    state = InputState()
    state.handle(key_down(5))
    state.handle(key_down(6))
    state.handle(key_up(5))
    assert state.keys == {6}