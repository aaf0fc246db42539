"""Process-wide default :class:`LayoutOptions`."""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Any, Optional

from .model import LayoutOptions

_LAYOUT_OPTIONS = LayoutOptions()


def get_layout_options() -> LayoutOptions:
    return copy.deepcopy(_LAYOUT_OPTIONS)


def set_layout_options(options: Optional[LayoutOptions] = None, **overrides: Any) -> LayoutOptions:
    """Install new defaults and return a copy of them.

    ``overrides`` replace single fields of ``options`` (or of the current
    defaults when ``options`` is omitted). The result is rebuilt through
    ``LayoutOptions`` so fields mutated after construction are validated
    again; an invalid value raises ``ValueError`` and leaves the defaults
    untouched.
    """

    global _LAYOUT_OPTIONS
    base = _LAYOUT_OPTIONS if options is None else options
    _LAYOUT_OPTIONS = replace(base, **overrides)
    return get_layout_options()
