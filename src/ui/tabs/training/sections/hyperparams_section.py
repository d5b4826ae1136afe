"""Training tab: Hyperparameters section builder.

Also provides the editable field rows shared with the compact panel.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import flet as ft


def format_param_value(value: Any) -> str:
    """Text shown in a hyperparameter field (JSON spelling for booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def build_hyperparam_rows(
    hyperparams: Dict[str, Any],
    on_edit: Callable[[str, str], None],
    *,
    dense: bool = False,
    text_color=None,
    field_bgcolor=None,
) -> List[ft.Row]:
    """One ``name | TextField`` row per hyperparameter, in response order."""
    rows: List[ft.Row] = []
    for key, value in hyperparams.items():
        tf = ft.TextField(
            value=format_param_value(value),
            data=key,
            dense=dense,
            text_size=11 if dense else None,
            height=30 if dense else None,
            content_padding=ft.padding.symmetric(4, 8) if dense else None,
            bgcolor=field_bgcolor,
            color=text_color,
            border=ft.InputBorder.NONE if dense else None,
            expand=1,
            on_change=lambda e, k=key: on_edit(k, e.control.value),
        )
        name = ft.Text(
            key,
            size=11 if dense else 14,
            color=text_color,
            no_wrap=True,
            overflow=ft.TextOverflow.ELLIPSIS,
            tooltip=key,
        )
        rows.append(
            ft.Row(
                [ft.Container(name, expand=1), ft.Container(tf, expand=1 if dense else 2)],
                spacing=8 if dense else 12,
                vertical_alignment=ft.CrossAxisAlignment.CENTER,
            )
        )
    return rows


def build_hyperparams_section(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    hp_host: ft.Column,
) -> ft.Container:
    """Section is hidden by the controller while the map is empty."""
    help_text = "Defaults for the selected model. Edited values are sent to the backend as text."
    return ft.Container(
        content=ft.Column(
            [
                section_title(
                    "Hyperparameters",
                    getattr(ICONS, "TUNE", ICONS.SETTINGS),
                    help_text,
                    on_help_click=_mk_help_handler(help_text),
                ),
                ft.Container(
                    content=hp_host,
                    border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                    border_radius=8,
                    padding=10,
                ),
            ],
            spacing=12,
        ),
        width=760,
        visible=False,
    )
