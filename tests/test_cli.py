from unittest import mock

import pytest

from keyfix import clipboard
from keyfix.cli import main


class _FakeTclError(Exception):
    pass


@pytest.fixture
def fake_tk():
    fake = mock.MagicMock()
    fake.TclError = _FakeTclError
    with mock.patch.object(clipboard, "tkinter", fake):
        yield fake


@pytest.mark.parametrize(
    ("clip", "expected"),
    [
        ("اثممخ", "hello"),
        ("ؤشف", "cat"),
        (";dt phg;", "كيف حالك"),
        ("hgr'm hglaladm", "القطة المشمشية"),
    ],
)
def test_main_fixes_clipboard(fake_tk, clip, expected):
    fake_tk.Tk.return_value.clipboard_get.return_value = clip
    assert main([]) == 0
    fake_tk.Tk.return_value.clipboard_append.assert_called_once_with(expected)


def test_main_with_empty_clipboard_writes_empty_text(fake_tk):
    fake_tk.Tk.return_value.clipboard_get.side_effect = _FakeTclError("empty")
    assert main([]) == 0
    fake_tk.Tk.return_value.clipboard_append.assert_called_once_with("")


def test_main_rejects_unknown_option(fake_tk):
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2
    assert fake_tk.Tk.call_count == 0