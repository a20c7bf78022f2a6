"""Old names kept working for callers that have not migrated yet."""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Any, Callable, List

from .normalise import normalise_note
from .pitch import name_to_number, number_to_name

logger = logging.getLogger(__name__)

_WRAPPERS: List["_Deprecated"] = []


class _Deprecated:
    """Callable that warns on first use, then forwards to ``func``."""

    def __init__(self, func: Callable[..., Any], message: str):
        self.func = func
        self.message = message
        self.warned = False
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if not self.warned:
            self.warned = True
            warnings.warn(self.message, DeprecationWarning, stacklevel=2)
            logger.warning(self.message)
        return self.func(*args, **kwargs)


def deprecate(func: Callable[..., Any], message: str) -> Callable[..., Any]:
    """Wrap ``func`` so its first call emits ``message`` as a deprecation."""

    wrapper = _Deprecated(func, message)
    _WRAPPERS.append(wrapper)
    return wrapper


def reset_deprecation_warnings() -> None:
    """Make every deprecated alias warn again on its next call."""

    for wrapper in _WRAPPERS:
        wrapper.warned = False


def _noop(*_args: Any, **_kwargs: Any) -> None:
    return None


note_to_number = deprecate(
    name_to_number, "midi_tools: note_to_number(name) is now name_to_number(name)."
)
number_to_note = deprecate(
    number_to_name, "midi_tools: number_to_note(number) is now number_to_name(number)."
)
normalise_data = deprecate(_noop, "midi_tools: normalise_data() has been deprecated and does nothing.")
normalise_note_on = deprecate(_noop, "midi_tools: normalise_note_on() has been deprecated and does nothing.")
normalise_note_off = deprecate(
    normalise_note, "midi_tools: normalise_note_off(message) is now normalise_note(message)."
)


__all__ = [
    "deprecate",
    "normalise_data",
    "normalise_note_off",
    "normalise_note_on",
    "note_to_number",
    "number_to_note",
    "reset_deprecation_warnings",
]
