"""
Transient UI state: which panel is shown, which config is being edited,
and the toast queue.
"""
from dataclasses import dataclass, field, replace
from typing import Optional

PANELS = ("list", "view", "form")


@dataclass(frozen=True)
class Toast:
    id: int
    type: str
    message: str


@dataclass
class UIState:
    active_panel: str = "list"
    editing_id: Optional[str] = None  # None = create mode
    toasts: list = field(default_factory=list)
    next_toast_id: int = 1


def open_create(state: UIState) -> UIState:
    return replace(state, active_panel="form", editing_id=None)


def open_edit(state: UIState, config_id: str) -> UIState:
    return replace(state, active_panel="form", editing_id=config_id)


def close_form(state: UIState) -> UIState:
    return replace(state, active_panel="list", editing_id=None)


def set_active_panel(state: UIState, panel: str) -> UIState:
    if panel not in PANELS:
        raise ValueError(f"Unknown panel: {panel}")
    return replace(state, active_panel=panel)


def add_toast(state: UIState, type: str, message: str) -> UIState:
    toast = Toast(id=state.next_toast_id, type=type, message=message)
    return replace(
        state,
        toasts=list(state.toasts) + [toast],
        next_toast_id=state.next_toast_id + 1,
    )


def remove_toast(state: UIState, toast_id: int) -> UIState:
    return replace(state, toasts=[t for t in state.toasts if t.id != toast_id])
