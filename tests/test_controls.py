import pygame

from snake.config import WIDTH, HEIGHT, UP, DOWN, LEFT, RIGHT, RUNNING, PAUSED, OVER, GRID_SIZE
from snake.controls import handle_event, pointer_pos, QUIT, FULLSCREEN
from snake.render import button_rects, OVERLAY_BUTTON, FULLSCREEN_BUTTON


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(name):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=button_rects()[name].center)


def tap(name):
    cx, cy = button_rects()[name].center
    return pygame.event.Event(pygame.FINGERDOWN, x=cx / WIDTH, y=cy / HEIGHT, finger_id=0)


def game_over(session):
    session.state.snake = [(GRID_SIZE - 1, 0)]
    session.tick()
    assert session.state.run_state == OVER


def test_arrow_keys_set_intent(session):
    handle_event(session, key(pygame.K_UP), 0)
    assert session.state.pending == UP
    handle_event(session, key(pygame.K_DOWN), 0)
    assert session.state.pending == DOWN
    # LEFT is the reverse of the committed RIGHT
    handle_event(session, key(pygame.K_LEFT), 0)
    assert session.state.pending == DOWN


def test_dpad_uses_same_rule(session):
    handle_event(session, click("LEFT"), 0)
    assert session.state.pending == RIGHT
    handle_event(session, click("UP"), 0)
    assert session.state.pending == UP
    handle_event(session, tap("DOWN"), 0)
    assert session.state.pending == DOWN
    assert session.state.direction == RIGHT


def test_space_toggles_pause(session):
    handle_event(session, key(pygame.K_SPACE), 10)
    assert session.state.run_state == PAUSED
    handle_event(session, key(pygame.K_SPACE), 20)
    assert session.state.run_state == RUNNING


def test_overlay_button_resumes(session):
    handle_event(session, key(pygame.K_SPACE), 10)
    handle_event(session, click(OVERLAY_BUTTON), 20)
    assert session.state.run_state == RUNNING


def test_overlay_button_ignored_while_running(session):
    handle_event(session, click(OVERLAY_BUTTON), 20)
    assert session.state.run_state == RUNNING
    assert session.state.snake == [(10, 10)]


def test_keys_ignored_when_over(session):
    game_over(session)
    handle_event(session, key(pygame.K_SPACE), 0)
    handle_event(session, key(pygame.K_UP), 0)
    assert session.state.run_state == OVER
    assert session.state.pending == RIGHT


def test_restart_from_key_or_button(session):
    game_over(session)
    handle_event(session, key(pygame.K_r), 0)
    assert session.state.run_state == RUNNING
    assert session.state.snake == [(10, 10)]

    game_over(session)
    handle_event(session, click(OVERLAY_BUTTON), 0)
    assert session.state.run_state == RUNNING


def test_loop_actions(session):
    assert handle_event(session, pygame.event.Event(pygame.QUIT), 0) == QUIT
    assert handle_event(session, key(pygame.K_F11), 0) == FULLSCREEN
    assert handle_event(session, key(pygame.K_a), 0) is None


def test_pointer_pos():
    assert pointer_pos(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(1, 1))) is None
    assert pointer_pos(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.0, finger_id=0)) == (WIDTH // 2, 0)
    assert pointer_pos(key(pygame.K_UP)) is None


def test_buttons_do_not_overlap():
    rects = button_rects()
    names = [n for n in rects if n != OVERLAY_BUTTON]
    for i, a in enumerate(names):
        for b in names[i + 1:]:
            assert not rects[a].colliderect(rects[b])


def test_fullscreen_button(session):
    assert handle_event(session, click(FULLSCREEN_BUTTON), 0) == FULLSCREEN
    assert handle_event(session, tap(FULLSCREEN_BUTTON), 0) == FULLSCREEN
    assert session.state.pending == RIGHT
    assert session.state.run_state == RUNNING
    assert handle_event(session, click("UP"), 0) is None
