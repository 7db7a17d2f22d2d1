"""
Client-side cache of the server's configuration collection.

The cache is a ``ConfigListState`` value kept in ``st.session_state``.
Transition functions never mutate their input; they return a new state so
each step can be checked on its own:

    idle -> loading -> succeeded | failed

The thunk-style functions at the bottom (``fetch_configs``, ``create_config``...)
call the API client and chain the matching transitions.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Optional, Union

IDLE = "idle"
LOADING = "loading"
SUCCEEDED = "succeeded"
FAILED = "failed"

CONNECTION_ERROR = "Cannot connect to backend"
NOT_FOUND_ERROR = "Config not found."


@dataclass
class ConfigListState:
    items: list = field(default_factory=list)
    selected: Optional[dict] = None
    status: str = IDLE
    error: Optional[str] = None
    field_errors: dict = field(default_factory=dict)
    last_saved: Optional[str] = None
    # Set when the server reports a record we hold as missing
    needs_refresh: bool = False


# ==================== Transitions ====================

def fetch_pending(state: ConfigListState) -> ConfigListState:
    return replace(state, status=LOADING, error=None)


def fetch_fulfilled(state: ConfigListState, items: list) -> ConfigListState:
    """Replace the cache wholesale with the server's list."""
    return replace(state, status=SUCCEEDED, items=list(items), needs_refresh=False)


def fetch_rejected(state: ConfigListState, error: str) -> ConfigListState:
    return replace(state, status=FAILED, error=error)


def fetch_one_fulfilled(state: ConfigListState, record: dict) -> ConfigListState:
    """Select a freshly fetched record and refresh its cached copy."""
    items = [record if c.get("id") == record.get("id") else c for c in state.items]
    return replace(state, status=SUCCEEDED, items=items, selected=record)


def save_pending(state: ConfigListState) -> ConfigListState:
    return replace(state, status=LOADING, error=None, field_errors={})


def create_fulfilled(state: ConfigListState, record: dict) -> ConfigListState:
    """Prepend the created record and mark it as last saved."""
    return replace(
        state,
        status=SUCCEEDED,
        items=[record] + list(state.items),
        last_saved=record.get("id"),
    )


def update_fulfilled(state: ConfigListState, record: dict) -> ConfigListState:
    """Replace the matching record in place and mark it as last saved."""
    items = [record if c.get("id") == record.get("id") else c for c in state.items]
    selected = state.selected
    if selected is not None and selected.get("id") == record.get("id"):
        selected = record
    return replace(
        state,
        status=SUCCEEDED,
        items=items,
        selected=selected,
        last_saved=record.get("id"),
    )


def delete_fulfilled(state: ConfigListState, config_id: str) -> ConfigListState:
    items = [c for c in state.items if c.get("id") != config_id]
    selected = state.selected
    if selected is not None and selected.get("id") == config_id:
        selected = None
    last_saved = None if state.last_saved == config_id else state.last_saved
    return replace(state, status=SUCCEEDED, items=items, selected=selected, last_saved=last_saved)


def save_rejected(state: ConfigListState, payload: Union[dict, str, None]) -> ConfigListState:
    """
    Record a failed create/update/delete.

    A ``{"errors": {...}}`` payload is kept as per-field errors for the form;
    anything else becomes the general error message.
    """
    if isinstance(payload, dict) and payload.get("errors"):
        return replace(state, status=FAILED, field_errors=dict(payload["errors"]))
    return replace(state, status=FAILED, error=payload or "Request failed.")


def clear_errors(state: ConfigListState) -> ConfigListState:
    return replace(state, error=None, field_errors={})


def set_selected(state: ConfigListState, record: dict) -> ConfigListState:
    return replace(state, selected=record)


def clear_selected(state: ConfigListState) -> ConfigListState:
    return replace(state, selected=None)


# ==================== API-driven actions ====================

def _error_message(resp: dict, default: str) -> str:
    """Pick a user-facing message from an API client response."""
    if resp.get("status") == 0:
        return resp.get("error") or CONNECTION_ERROR
    data = resp.get("data")
    if isinstance(data, dict) and data.get("error"):
        return data["error"]
    return default


def _payload(resp: dict) -> Any:
    data = resp.get("data")
    if isinstance(data, dict):
        return data.get("data")
    return None


def _reject_save(state: ConfigListState, resp: dict, default: str) -> ConfigListState:
    status = resp.get("status")
    data = resp.get("data")
    if status == 422 and isinstance(data, dict) and data.get("errors"):
        return save_rejected(state, {"errors": data["errors"]})
    state = save_rejected(state, _error_message(resp, default))
    if status == 404:
        state = replace(state, needs_refresh=True)
    return state


def fetch_configs(state: ConfigListState, api: Any) -> ConfigListState:
    state = fetch_pending(state)
    resp = api.list_configs()
    if resp.get("status") == 200 and _payload(resp) is not None:
        return fetch_fulfilled(state, _payload(resp))
    return fetch_rejected(state, _error_message(resp, "Failed to load configs."))


def fetch_config(state: ConfigListState, api: Any, config_id: str) -> ConfigListState:
    state = fetch_pending(state)
    resp = api.get_config(config_id)
    if resp.get("status") == 200 and _payload(resp) is not None:
        return fetch_one_fulfilled(state, _payload(resp))
    state = fetch_rejected(state, _error_message(resp, NOT_FOUND_ERROR))
    if resp.get("status") == 404:
        state = replace(state, needs_refresh=True, selected=None)
    return state


def create_config(state: ConfigListState, api: Any, payload: dict) -> ConfigListState:
    state = save_pending(state)
    resp = api.create_config(payload)
    if resp.get("status") == 201 and _payload(resp) is not None:
        return create_fulfilled(state, _payload(resp))
    return _reject_save(state, resp, "Failed to create config.")


def update_config(state: ConfigListState, api: Any, config_id: str, payload: dict) -> ConfigListState:
    state = save_pending(state)
    resp = api.update_config(config_id, payload)
    if resp.get("status") == 200 and _payload(resp) is not None:
        return update_fulfilled(state, _payload(resp))
    return _reject_save(state, resp, "Failed to update config.")


def delete_config(state: ConfigListState, api: Any, config_id: str) -> ConfigListState:
    state = save_pending(state)
    resp = api.delete_config(config_id)
    if resp.get("status") == 204:
        return delete_fulfilled(state, config_id)
    return _reject_save(state, resp, "Failed to delete config.")
