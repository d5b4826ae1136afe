"""Training tab: Target column and model selector section builder."""

from __future__ import annotations

import flet as ft


def build_model_section(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    target_tf: ft.TextField,
    model_dd: ft.Dropdown,
) -> ft.Container:
    help_text = (
        "Pick the model to train. Default hyperparameters are loaded from the backend "
        "whenever the model changes. Leave the target empty to let the backend use the last column."
    )
    return ft.Container(
        content=ft.Column(
            [
                section_title(
                    "Model",
                    getattr(ICONS, "MODEL_TRAINING", ICONS.SCIENCE),
                    help_text,
                    on_help_click=_mk_help_handler(help_text),
                ),
                ft.Container(
                    content=ft.Column([target_tf, model_dd], spacing=12),
                    border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                    border_radius=8,
                    padding=10,
                ),
            ],
            spacing=12,
        ),
        width=760,
    )
