"""Compact training panel.

A narrow, dark card with the same training workflow as the Training tab.
Results show only numeric scalar metrics, and the model download is an
explicit button.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import flet as ft

from helpers.common import schedule_task
from helpers.logging_config import get_logger
from helpers.metrics import format_metric_value, numeric_scalar_metrics
from helpers.session import SessionProvider
from helpers.theme import (
    DOWNLOAD_ICON,
    PANEL_BG,
    PANEL_BORDER,
    PANEL_FIELD_BG,
    PANEL_INSET_BG,
    PANEL_MUTED,
    PANEL_RESULT_BG,
    PANEL_ROW_BG,
    PANEL_TEXT,
    TRAIN_ICON,
)
from helpers.training_workflow import (
    EVENT_HYPERPARAMETERS,
    EVENT_LOADING,
    EVENT_RESULT,
    MODEL_CHOICES,
    TrainingResult,
    TrainingWorkflow,
)
from helpers.ui import labeled_value, open_url, show_alert
from ui.tabs.training.sections.hyperparams_section import build_hyperparam_rows


logger = get_logger(__name__)

PANEL_WIDTH = 280
TRAIN_LABEL = "Train"
TRAINING_LABEL = "Training..."
NO_RESULTS_TEXT = "No results yet"
NO_SCALAR_METRICS_TEXT = "No scalar metrics returned"
AUTO_TARGET_TEXT = "auto (last column)"


def _caption(text: str) -> ft.Text:
    return ft.Text(text, size=11, color=PANEL_MUTED)


def _field(**kwargs) -> ft.TextField:
    return ft.TextField(
        dense=True,
        text_size=11,
        height=30,
        content_padding=ft.padding.symmetric(4, 8),
        bgcolor=PANEL_FIELD_BG,
        color=PANEL_TEXT,
        border=ft.InputBorder.NONE,
        filled=True,
        **kwargs,
    )


def build_metric_rows(result: TrainingResult) -> List[ft.Control]:
    """Rows of ``name | value`` for finite numeric metrics, or a placeholder."""
    metrics = numeric_scalar_metrics(result.metrics)
    if not metrics:
        return [ft.Text(NO_SCALAR_METRICS_TEXT, size=11, color=PANEL_MUTED)]
    return [
        ft.Container(
            content=ft.Row(
                [
                    ft.Text(name, size=11, color=PANEL_MUTED, no_wrap=True, overflow=ft.TextOverflow.ELLIPSIS, expand=1),
                    ft.Text(format_metric_value(value), size=11, color=PANEL_TEXT, weight=ft.FontWeight.W_600),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            data=name,
            bgcolor=PANEL_ROW_BG,
            border_radius=4,
            padding=ft.padding.symmetric(4, 8),
        )
        for name, value in metrics
    ]


def build_compact_result_controls(
    result: Optional[TrainingResult], on_download: Callable[[str], None]
) -> List[ft.Control]:
    if result is None:
        return [ft.Text(NO_RESULTS_TEXT, size=11, color=PANEL_MUTED)]

    details: List[ft.Control] = [
        labeled_value("Problem", result.problem_type, size=11, label_color=PANEL_TEXT, value_color=PANEL_MUTED),
        labeled_value(
            "Target",
            result.target_column if result.target_column is not None else AUTO_TARGET_TEXT,
            size=11,
            label_color=PANEL_TEXT,
            value_color=PANEL_MUTED,
        ),
        labeled_value("Path", result.model_path, size=11, label_color=PANEL_TEXT, value_color=PANEL_MUTED),
    ]
    if result.hf_filename:
        details.append(
            labeled_value("File", result.hf_filename, size=11, label_color=PANEL_TEXT, value_color=PANEL_MUTED)
        )

    controls: List[ft.Control] = [
        ft.Row(
            [
                ft.Text("Results", size=12, weight=ft.FontWeight.W_500, color=PANEL_TEXT),
                ft.Text(result.model_name or "", size=11, color=PANEL_MUTED, no_wrap=True),
            ],
            alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
        ),
        ft.Column(details, spacing=2),
        ft.Text("Metrics", size=11, weight=ft.FontWeight.W_500, color=PANEL_TEXT),
        ft.Container(
            content=ft.Column(build_metric_rows(result), spacing=4, scroll=ft.ScrollMode.AUTO),
            height=90,
        ),
    ]

    url = result.huggingface_download_url
    if url:
        controls.append(
            ft.ElevatedButton(
                "Download Model",
                icon=DOWNLOAD_ICON,
                width=PANEL_WIDTH,
                on_click=lambda e: on_download(url),
            )
        )
    return controls


def build_compact_training_panel(
    page: ft.Page,
    *,
    session_provider: SessionProvider,
    get_base_url: Callable[[], str],
) -> Tuple[ft.Container, TrainingWorkflow]:
    """Build the compact training card and return it with its workflow."""

    workflow = TrainingWorkflow(
        get_session_id=session_provider.get,
        get_base_url=get_base_url,
        alert=lambda msg: show_alert(page, msg),
    )

    session_tf = _field(value=session_provider.get(), hint_text="No active session", read_only=True)
    target_tf = _field(
        hint_text="Leave empty → last column",
        on_change=lambda e: workflow.set_target(e.control.value),
    )

    def on_model_change(e):
        value = getattr(e.control, "value", None)

        async def _select():
            await workflow.select_model(value)

        schedule_task(page, _select)

    model_dd = ft.Dropdown(
        hint_text="Choose model",
        options=[ft.dropdown.Option(m) for m in MODEL_CHOICES],
        dense=True,
        text_size=12,
        bgcolor=PANEL_FIELD_BG,
        filled=True,
        on_change=on_model_change,
    )

    hp_host = ft.Column(spacing=4, scroll=ft.ScrollMode.AUTO)
    hp_block = ft.Column(
        [
            _caption("Hyperparams"),
            ft.Container(
                content=hp_host,
                height=110,
                bgcolor=PANEL_INSET_BG,
                border=ft.border.all(1, "#1f2a36"),
                border_radius=6,
                padding=8,
            ),
        ],
        spacing=4,
        visible=False,
    )

    async def on_train():
        await workflow.submit()

    train_btn = ft.FilledButton(
        TRAIN_LABEL,
        icon=TRAIN_ICON,
        width=PANEL_WIDTH,
        on_click=lambda e: schedule_task(page, on_train),
    )

    results_host = ft.Column(build_compact_result_controls(None, lambda _url: None), spacing=6)

    def render_hyperparams() -> None:
        hp_host.controls = build_hyperparam_rows(
            workflow.hyperparameters,
            workflow.set_param,
            dense=True,
            text_color=PANEL_TEXT,
            field_bgcolor=PANEL_INSET_BG,
        )
        hp_block.visible = bool(workflow.hyperparameters)

    def render_loading() -> None:
        train_btn.disabled = workflow.loading
        train_btn.text = TRAINING_LABEL if workflow.loading else TRAIN_LABEL

    def render_result() -> None:
        results_host.controls = build_compact_result_controls(workflow.result, lambda url: open_url(page, url))

    def _refresh() -> None:
        try:
            page.update()
        except Exception as ex:
            logger.debug("Page update skipped: %s", ex)

    def on_workflow_event(event: str) -> None:
        if event == EVENT_HYPERPARAMETERS:
            render_hyperparams()
        elif event == EVENT_LOADING:
            render_loading()
        elif event == EVENT_RESULT:
            render_result()
        _refresh()

    def on_session_change(session_id: str) -> None:
        session_tf.value = session_id
        _refresh()

    workflow.subscribe(on_workflow_event)
    session_provider.subscribe(on_session_change)

    panel = ft.Container(
        content=ft.Column(
            [
                ft.Text("Model Training", size=13, weight=ft.FontWeight.W_600, color=PANEL_TEXT, text_align=ft.TextAlign.CENTER),
                ft.Column([_caption("Session"), session_tf], spacing=2),
                ft.Column([_caption("Target (optional)"), target_tf], spacing=2),
                ft.Column([_caption("Model"), model_dd], spacing=2),
                hp_block,
                train_btn,
                ft.Container(
                    content=results_host,
                    bgcolor=PANEL_RESULT_BG,
                    border=ft.border.all(1, "#16232b"),
                    border_radius=6,
                    padding=8,
                ),
            ],
            spacing=8,
            horizontal_alignment=ft.CrossAxisAlignment.STRETCH,
        ),
        width=PANEL_WIDTH,
        bgcolor=PANEL_BG,
        border=ft.border.all(1, PANEL_BORDER),
        border_radius=16,
        padding=12,
    )
    return panel, workflow
