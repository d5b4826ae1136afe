"""Training tab builder for ModelTrainer Studio.

Composes the full-page training layout from the per-section builders under
``ui.tabs.training.sections``. Controls and handlers are created by
``training_controller``; this module only arranges them.
"""

from __future__ import annotations

import flet as ft

from ui.tabs.training.sections.session_section import build_session_section
from ui.tabs.training.sections.model_section import build_model_section
from ui.tabs.training.sections.hyperparams_section import build_hyperparams_section
from ui.tabs.training.sections.results_section import build_results_section


def build_training_tab(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    session_tf: ft.TextField,
    target_tf: ft.TextField,
    model_dd: ft.Dropdown,
    hp_host: ft.Column,
    train_btn: ft.Control,
    results_host: ft.Column,
    hyperparams_section_ref=None,
    results_section_ref=None,
) -> ft.Container:
    common = dict(
        section_title=section_title,
        ICONS=ICONS,
        BORDER_BASE=BORDER_BASE,
        WITH_OPACITY=WITH_OPACITY,
        _mk_help_handler=_mk_help_handler,
    )
    session_section = build_session_section(session_tf=session_tf, **common)
    model_section = build_model_section(target_tf=target_tf, model_dd=model_dd, **common)
    hyperparams_section = build_hyperparams_section(hp_host=hp_host, **common)
    results_section = build_results_section(results_host=results_host, **common)

    # Expose toggled sections to the controller
    if hyperparams_section_ref is not None:
        hyperparams_section_ref["control"] = hyperparams_section
    if results_section_ref is not None:
        results_section_ref["control"] = results_section

    return ft.Container(
        content=ft.Column(
            [
                ft.Row(
                    [
                        ft.Container(
                            content=ft.Column(
                                [
                                    ft.Text("Train Machine Learning Model", size=22, weight=ft.FontWeight.W_600),
                                    session_section,
                                    model_section,
                                    hyperparams_section,
                                    ft.Container(train_btn, width=760),
                                    results_section,
                                ],
                                spacing=16,
                                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                            ),
                            width=800,
                        )
                    ],
                    alignment=ft.MainAxisAlignment.CENTER,
                )
            ],
            scroll=ft.ScrollMode.AUTO,
            spacing=0,
        ),
        padding=16,
    )
