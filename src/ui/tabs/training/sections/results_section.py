"""Training tab: Results section builder."""

from __future__ import annotations

from typing import List

import flet as ft

from helpers.metrics import metrics_to_json
from helpers.training_workflow import TrainingResult
from helpers.ui import labeled_value, link_text


def build_result_controls(result: TrainingResult, *, BORDER_BASE, WITH_OPACITY) -> List[ft.Control]:
    """Model, problem type, the full metrics JSON, download link and server path."""
    controls: List[ft.Control] = [
        labeled_value("Model", result.model_name),
        labeled_value("Type", result.problem_type),
        ft.Container(
            content=ft.Text(metrics_to_json(result.metrics), size=12, font_family="monospace", selectable=True),
            bgcolor=WITH_OPACITY(0.06, BORDER_BASE),
            border_radius=6,
            padding=8,
        ),
    ]
    if result.huggingface_download_url:
        controls.append(
            ft.Row(
                [
                    ft.Text("Download Model:", weight=ft.FontWeight.BOLD, size=13),
                    link_text("HuggingFace File", result.huggingface_download_url, size=13),
                ],
                spacing=6,
            )
        )
    if result.model_path:
        controls.append(
            ft.Text(f"Server file: {result.model_path}", size=11, color=WITH_OPACITY(0.6, BORDER_BASE))
        )
    return controls


def build_results_section(
    *,
    section_title,
    ICONS,
    BORDER_BASE,
    WITH_OPACITY,
    _mk_help_handler,
    results_host: ft.Column,
) -> ft.Container:
    """Section is hidden by the controller until the first successful run."""
    help_text = "Metrics returned by the backend for the last successful training run."
    return ft.Container(
        content=ft.Column(
            [
                section_title(
                    "Results",
                    getattr(ICONS, "INSIGHTS", ICONS.ANALYTICS),
                    help_text,
                    on_help_click=_mk_help_handler(help_text),
                ),
                ft.Container(
                    content=results_host,
                    bgcolor=WITH_OPACITY(0.03, BORDER_BASE),
                    border=ft.border.all(1, WITH_OPACITY(0.1, BORDER_BASE)),
                    border_radius=8,
                    padding=12,
                ),
            ],
            spacing=12,
        ),
        width=760,
        visible=False,
    )
