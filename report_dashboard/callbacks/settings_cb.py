"""Settings callbacks — widget visibility toggles and ordering."""
import logging

from dash import Input, Output, State, ALL, callback_context, no_update
import dash_bootstrap_components as dbc

import supabase_loader as sl
from report_dashboard.theme import TOAST_STYLE
from report_dashboard.pages.settings import widget_list
from report_dashboard.user_settings import move_widget, set_widget_visibility

logger = logging.getLogger(__name__)


def _saved(service, previous, settings, message):
    """Persist settings and return (store, list, toast) outputs.

    On a failed save the store is left alone and the list is redrawn from
    ``previous`` so the controls show what is actually saved.
    """
    try:
        service.save_user_settings(settings)
    except sl.DataSourceError as e:
        logger.error("Error updating user settings: %s", e)
        return no_update, widget_list(previous), dbc.Toast(
            "Не удалось сохранить настройки.", header="Ошибка", icon="danger",
            duration=4000, style=TOAST_STYLE,
        )
    return settings, widget_list(settings), dbc.Toast(
        message, header="Настройки сохранены", icon="success",
        duration=3000, style=TOAST_STYLE,
    )


def register_callbacks(app, service):
    # ── Show / hide widget ────────────────────────────────────────────────
    @app.callback(
        Output("user-settings-store", "data", allow_duplicate=True),
        Output("widget-settings-list", "children", allow_duplicate=True),
        Output("toast-container", "children", allow_duplicate=True),
        Input({"type": "widget-visible", "widget": ALL}, "value"),
        State("user-settings-store", "data"),
        prevent_initial_call=True,
    )
    def toggle_visibility(_values, settings):
        trigger = callback_context.triggered_id
        if not trigger or not settings:
            return no_update, no_update, no_update
        widget_id = trigger["widget"]
        is_visible = bool(callback_context.triggered[0].get("value"))
        if settings["dashboard"]["widgetVisibility"].get(widget_id, True) == is_visible:
            return no_update, no_update, no_update
        updated = set_widget_visibility(settings, widget_id, is_visible)
        return _saved(service, settings, updated, "Виджет показан" if is_visible else "Виджет скрыт")

    # ── Move widget up / down ─────────────────────────────────────────────
    @app.callback(
        Output("user-settings-store", "data", allow_duplicate=True),
        Output("widget-settings-list", "children", allow_duplicate=True),
        Output("toast-container", "children", allow_duplicate=True),
        Input({"type": "widget-move", "widget": ALL, "dir": ALL}, "n_clicks"),
        State("user-settings-store", "data"),
        prevent_initial_call=True,
    )
    def reorder(_clicks, settings):
        trigger = callback_context.triggered_id
        if not trigger or not settings or not callback_context.triggered[0].get("value"):
            return no_update, no_update, no_update
        updated = move_widget(settings, trigger["widget"], trigger["dir"])
        return _saved(service, settings, updated, "Порядок виджетов обновлён")
