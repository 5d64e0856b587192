# ui_state.py
# The page's whole state in one value, changed only through the functions below.

from dataclasses import dataclass, field, replace
from typing import Optional

from models import DetailLevel, FormState, TestFocus

FIELD_TYPES = {
    "user_story": str,
    "system_url": str,
    "test_focus": TestFocus,
    "detail_level": DetailLevel,
}


@dataclass(frozen=True)
class AppState:
    form: FormState = field(default_factory=FormState)
    is_loading: bool = False
    output: Optional[str] = None
    error: Optional[str] = None


def initial_state() -> AppState:
    return AppState()


def change_field(state: AppState, name: str, value) -> AppState:
    """Return a state whose form has `name` set to `value`; enum fields accept their display text."""
    kind = FIELD_TYPES[name]
    return replace(state, form=replace(state.form, **{name: kind(value)}))


def submit(state: AppState) -> AppState:
    return replace(state, is_loading=True, output=None, error=None)


def succeed(state: AppState, text: str) -> AppState:
    return replace(state, is_loading=False, output=text, error=None)


def fail(state: AppState, message: str) -> AppState:
    return replace(state, is_loading=False, output=None, error=message or "An unknown error occurred.")
