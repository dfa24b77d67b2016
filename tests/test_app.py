import cv2
import pytest

from calculadora.app.calculator_app import CalculatorApp
from calculadora.core.commands import BUTTON_LAYOUT


def run_keys(app, keys):
    for char in keys:
        assert app.handle_key(ord(char)) is True
    return app.display


def test_process_returns_display(app):
    assert app.process("num_5") == "5"
    assert app.process("add") == "5"
    assert app.process("num_3") == "3"
    assert app.process("equal") == "8"


def test_keyboard_sequence(app):
    assert run_keys(app, "12*3=") == "36"
    assert run_keys(app, "p") == "0.36"
    assert run_keys(app, " ") == ""


def test_keyboard_sign_and_decimal(app):
    assert run_keys(app, "i4..5") == "-4.5"
    assert run_keys(app, "\r") == "-4.5"
    assert app.acc.current == -4.5


def test_unknown_key_is_ignored(app):
    run_keys(app, "7")
    assert app.handle_key(ord("x")) is True
    assert app.display == "7"


@pytest.mark.parametrize("key", [27, ord("Q")])
def test_quit_keys(app, key):
    assert app.handle_key(key) is False


def test_invalid_buffer_is_recovered(app, capsys):
    run_keys(app, "5+.=")
    assert app.display == ""
    assert app.acc.current is None
    assert app.acc.operator is None
    assert app.ui.feedback_msg == "Error"
    assert "Entrada no válida" in capsys.readouterr().out
    # la calculadora sigue funcionando
    assert run_keys(app, "2+2=") == "4"


def test_unknown_command_is_recovered(app):
    app.process("num_9")
    assert app.process("raiz") == ""


def test_click_on_buttons(app):
    def click(gid):
        for _, button_id, row, col, span in BUTTON_LAYOUT:
            if button_id == gid:
                x0, y0, x1, y1 = app.ui.button_rect(row, col, span)
                return app.handle_click((x0 + x1) // 2, (y0 + y1) // 2)

    for gid in ["num_7", "divide", "num_0", "equal"]:
        assert click(gid) == gid
    assert app.display == "inf"


def test_click_outside_buttons(app):
    assert app.handle_click(10, 10) is None
    assert app.display == ""


def test_mouse_callback_only_reacts_to_left_button(app):
    x0, y0, x1, y1 = app.ui.button_rect(3, 0)
    center = ((x0 + x1) // 2, (y0 + y1) // 2)
    app._on_mouse(cv2.EVENT_MOUSEMOVE, *center, 0, None)
    assert app.display == ""
    app._on_mouse(cv2.EVENT_LBUTTONDOWN, *center, 0, None)
    assert app.display == "1"


def test_clear_shows_feedback(app):
    run_keys(app, "9\t")
    assert app.ui.feedback_msg == "TODO BORRADO"


def test_draw_frame(app):
    run_keys(app, "9=")
    frame = app.draw()
    assert frame.shape == (app.ui.height, app.ui.width, 3)
    assert app.press_timer == app.press_time - 1


def test_strict_mode(config):
    config.commit_without_operator = False
    app = CalculatorApp(config)
    assert run_keys(app, "5=3=") == "5"


def test_precision_from_config(config):
    config.exponent_precision = 2
    app = CalculatorApp(config)
    assert run_keys(app, "1/3=") == "3.33e-01"


def test_voice_feedback(config, fake_engine):
    config.voice_enabled = True
    app = CalculatorApp(config)
    run_keys(app, "5+.5=")
    assert fake_engine.spoken == [
        "cinco", "más", "coma", "cinco", "igual a 5 coma 5",
    ]


def test_voice_toggle(config, fake_engine):
    app = CalculatorApp(config)
    run_keys(app, "1")
    assert fake_engine.spoken == []

    assert app.handle_key(ord("v")) is True
    assert config.voice_enabled is True
    run_keys(app, "2")
    assert fake_engine.spoken == ["voz activada", "dos"]

    app.handle_key(ord("v"))
    run_keys(app, "3")
    assert fake_engine.spoken == ["voz activada", "dos"]
    assert app.display == "123"
