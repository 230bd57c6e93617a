from dataclasses import FrozenInstanceError
import pytest

from dimensia.options import (
    FormatOptions,
    get_format_options,
    reset_format_options,
    set_format_options,
)

pytestmark = pytest.mark.usefixtures("restore_format_options")


def test_defaults():
    opts = get_format_options()
    assert opts.default_precision == 6
    assert opts.unicode_str is True


def test_set_and_reset():
    set_format_options(default_precision=3, unicode_str=False)
    assert get_format_options() == FormatOptions(default_precision=3, unicode_str=False)
    reset_format_options()
    assert get_format_options() == FormatOptions()


def test_get_returns_frozen_copy():
    opts = get_format_options()
    with pytest.raises(FrozenInstanceError):
        opts.default_precision = 2


@pytest.mark.parametrize("precision, exc", [(0, ValueError), (-4, ValueError), (2.5, TypeError), (True, TypeError)])
def test_invalid_precision(precision, exc):
    with pytest.raises(exc):
        FormatOptions(default_precision=precision)
    with pytest.raises(exc):
        set_format_options(default_precision=precision)
    assert get_format_options().default_precision == 6


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        set_format_options(colour=True)


def test_keyword_only():
    with pytest.raises(TypeError):
        FormatOptions(3, True)
