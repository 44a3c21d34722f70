"""Tests for debug logging."""

from pickmenu.utils import debug
from pickmenu.utils.config import Config


def enable_debug(pickmenu_dir):
    config = Config(pickmenu_dir)
    config.set_toggle("debug", True)
    debug.reload_config()


def test_debug_silent_when_disabled(mock_pickmenu_dir, capsys):
    debug.debug("menu", "hidden")
    assert capsys.readouterr().err == ""
    assert not (mock_pickmenu_dir / "debug.log").exists()


def test_debug_logs_to_file_and_stderr(mock_pickmenu_dir, capsys):
    enable_debug(mock_pickmenu_dir)

    debug.debug_nav("push", title="A", depth=1)

    err = capsys.readouterr().err
    assert "[pickmenu:nav]" in err
    assert "push | title=A depth=1" in err
    assert "push" in (mock_pickmenu_dir / "debug.log").read_text()


def test_category_helpers(mock_pickmenu_dir, capsys):
    enable_debug(mock_pickmenu_dir)

    debug.debug_menu("m")
    debug.debug_action("a")
    debug.debug_render("r")

    err = capsys.readouterr().err
    for category in ("menu", "action", "render"):
        assert f"[pickmenu:{category}]" in err


def test_log_error_always_writes_file(mock_pickmenu_dir, capsys):
    try:
        raise ValueError("bad input")
    except ValueError as e:
        debug.log_error("cli", "pick failed", e)

    text = (mock_pickmenu_dir / "debug.log").read_text()
    assert "ERROR: pick failed" in text
    assert "ValueError: bad input" in text
    assert capsys.readouterr().err == ""
