from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """
    Option flags for building and rendering values. See `set_format_options`
    for a description of each field.
    """
    default_precision: int = 6
    unicode_str: bool = True

    def __post_init__(self):
        """Check certain values"""
        if isinstance(self.default_precision, bool) or not isinstance(self.default_precision, int):
            raise TypeError("Require integer 'default_precision'.")
        if self.default_precision < 1:
            raise ValueError("Require 'default_precision' >= 1.")


# Single shared instance holding the defaults.
_format_options = FormatOptions()


# ----------------------------------------------------------------------

def get_format_options() -> FormatOptions:
    """
    Returns
    -------
    format_options : FormatOptions
        A copy of the current options.  For a full description of each
        option, see `set_format_options`.
    """
    return replace(_format_options)


def set_format_options(**kwargs) -> None:
    """
    Set the current (process wide) format options.  Environments built
    with an explicit ``options`` argument are not affected.

    Parameters
    ----------
    default_precision : int, default = 6
        Number of significant digits given to scalars made without an
        explicit precision.  Must be at least 1.

    unicode_str : bool, default = True
        Use middle dots and unicode superscripts in the pretty unit
        formatters (``Meter·Second⁻¹``).  If `False`, ``*`` and ``^n``
        are used instead.
    """
    global _format_options
    _format_options = replace(_format_options, **kwargs)


def reset_format_options() -> None:
    """Restore the default options."""
    global _format_options
    _format_options = FormatOptions()


__all__ = [
    "FormatOptions",
    "get_format_options",
    "set_format_options",
    "reset_format_options",
]
