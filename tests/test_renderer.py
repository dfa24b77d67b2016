import numpy as np
import pytest

from calculadora.config.settings import CalculatorConfig
from calculadora.core.commands import BUTTON_LAYOUT
from calculadora.ui.renderer import UIRenderer


@pytest.fixture
def ui():
    return UIRenderer(CalculatorConfig())


def center(ui, row, col, span):
    x0, y0, x1, y1 = ui.button_rect(row, col, span)
    return (x0 + x1) // 2, (y0 + y1) // 2


def test_frame_matches_window_size(ui):
    frame = ui.new_frame()
    config = CalculatorConfig()
    assert frame.shape == (config.get_window_size()[1], config.get_window_size()[0], 3)
    assert frame.dtype == np.uint8


@pytest.mark.parametrize("label, gid, row, col, span", BUTTON_LAYOUT)
def test_button_at_finds_each_button(ui, label, gid, row, col, span):
    assert ui.button_at(*center(ui, row, col, span)) == gid


def test_button_at_display_area(ui):
    assert ui.button_at(ui.width // 2, ui.config.display_height // 2) is None


def test_button_at_gap_between_buttons(ui):
    x0, _, _, _ = ui.button_rect(0, 1)
    _, y0, _, y1 = ui.button_rect(0, 0)
    assert ui.button_at(x0 - 2, (y0 + y1) // 2) is None


def test_zero_button_spans_two_columns(ui):
    _, y0, _, y1 = ui.button_rect(4, 0)
    assert ui.button_at(ui.button_rect(4, 1)[0] + 5, (y0 + y1) // 2) == "num_0"


def test_buttons_fit_in_window(ui):
    for _, _, row, col, span in BUTTON_LAYOUT:
        x0, y0, x1, y1 = ui.button_rect(row, col, span)
        assert 0 <= x0 < x1 <= ui.width
        assert 0 <= y0 < y1 <= ui.height


def test_draw_display_text(ui):
    empty = ui.new_frame()
    ui.draw_display(empty, "")
    frame = ui.new_frame()
    ui.draw_display(frame, "12345")
    assert (frame != empty).any()
    # el texto queda dentro del display
    assert (frame[ui.config.display_height:] == empty[ui.config.display_height:]).all()


def test_long_display_text_is_drawn(ui):
    frame = ui.new_frame()
    ui.draw_display(frame, "1234567890.123456789", is_result=True)
    assert frame[:ui.config.display_height].any()


def test_draw_buttons_highlights_pressed(ui):
    plain = ui.new_frame()
    ui.draw_buttons(plain)
    pressed = ui.new_frame()
    ui.draw_buttons(pressed, pressed="num_5")
    x, y = center(ui, 2, 1, 1)
    assert (plain != pressed).any()
    assert tuple(pressed[y - 25, x - 30]) != tuple(plain[y - 25, x - 30])


def test_feedback_fades_out(ui):
    ui.show_feedback("Error", (100, 100, 255), duration=2)
    frame = ui.new_frame()
    ui.draw_feedback(frame)
    assert ui.feedback_timer == 1
    ui.draw_feedback(ui.new_frame())
    assert ui.feedback_timer == 0
    blank = ui.new_frame()
    ui.draw_feedback(blank)
    assert (blank == ui.new_frame()).all()


def test_feedback_default_duration(ui):
    ui.show_feedback("hola")
    assert ui.feedback_timer == ui.config.feedback_duration
