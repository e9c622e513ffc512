"""
Dashboard layout preferences — widget order and visibility.

Settings live in ``profiles.settings`` as ``{"dashboard": {"widgetOrder": [...],
"widgetVisibility": {...}}}``.  Saved settings are merged over the defaults so
widgets added after a user last saved still show up.
"""
import copy

WIDGET_NAMES = {
    "cash_bank": "Денежные средства",
    "debt": "Задолженности",
    "plan_fact": "План-факт выручки",
    "inventory": "Товарные запасы",
    "cash_dynamics_chart": "Динамика денежных средств",
}

DEFAULT_WIDGET_ORDER = ["cash_bank", "debt", "plan_fact", "inventory", "cash_dynamics_chart"]

DEFAULT_SETTINGS = {
    "dashboard": {
        "widgetOrder": list(DEFAULT_WIDGET_ORDER),
        "widgetVisibility": {w: True for w in DEFAULT_WIDGET_ORDER},
    },
}


def default_settings():
    return copy.deepcopy(DEFAULT_SETTINGS)


def merge_dashboard_settings(saved):
    """Merge saved settings over the defaults.

    Unknown top-level keys are kept; widgets missing from the saved order are
    appended in default order; visibility defaults to True.
    """
    saved = saved or {}
    saved_dashboard = saved.get("dashboard") or {}
    defaults = DEFAULT_SETTINGS["dashboard"]

    order = list(saved_dashboard.get("widgetOrder") or defaults["widgetOrder"])
    order += [w for w in defaults["widgetOrder"] if w not in order]

    visibility = dict(defaults["widgetVisibility"])
    visibility.update(saved_dashboard.get("widgetVisibility") or {})

    merged = copy.deepcopy(saved)
    merged["dashboard"] = {
        **copy.deepcopy(saved_dashboard),
        "widgetOrder": order,
        "widgetVisibility": visibility,
    }
    return merged


def set_widget_visibility(settings, widget_id, is_visible):
    updated = copy.deepcopy(settings)
    updated["dashboard"]["widgetVisibility"][widget_id] = bool(is_visible)
    return updated


def move_widget(settings, widget_id, offset):
    """Shift a widget ``offset`` places in the order, clamped to the ends."""
    updated = copy.deepcopy(settings)
    order = updated["dashboard"]["widgetOrder"]
    if widget_id not in order:
        return updated
    idx = order.index(widget_id)
    new_idx = max(0, min(len(order) - 1, idx + offset))
    order.insert(new_idx, order.pop(idx))
    return updated


def visible_widgets(settings):
    dashboard = settings["dashboard"]
    return [w for w in dashboard["widgetOrder"] if dashboard["widgetVisibility"].get(w, True)]
