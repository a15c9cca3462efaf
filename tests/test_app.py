import pytest

from fractol.app import _frame_bytes, main
from fractol.view import View, usage_text


@pytest.mark.parametrize("argv", [[], ["-q"], ["-j", "0.1"]])
def test_main_invalid_arguments_print_usage(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == usage_text()


def test_frame_bytes_layout():
    view = View(width=3, height=2, max_iter=8)
    data = _frame_bytes(view)
    assert len(data) == 3 * 2 * 4
    first = view.color(view.iterations(0, 0)).to_bytes(4, "big")
    assert data[:4] == first
    last = view.color(view.iterations(2, 1)).to_bytes(4, "big")
    assert data[-4:] == last


def test_frame_bytes_alpha_channel_opaque():
    view = View(width=2, height=2, max_iter=5)
    data = _frame_bytes(view)
    assert data[3::4] == b"\xff" * 4