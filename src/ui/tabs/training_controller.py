"""Training tab controller for ModelTrainer Studio.

Builds the full-page training controls, wires them to a
:class:`helpers.training_workflow.TrainingWorkflow` and re-renders on
workflow events. Layout composition lives in ``tab_training.py`` and the
per-section builders under ``ui/tabs/training/sections/``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

import flet as ft

from helpers.common import schedule_task
from helpers.logging_config import get_logger
from helpers.session import SessionProvider
from helpers.theme import BORDER_BASE, ICONS, TRAIN_ICON
from helpers.training_workflow import (
    EVENT_HYPERPARAMETERS,
    EVENT_LOADING,
    EVENT_RESULT,
    MODEL_CHOICES,
    TrainingWorkflow,
)
from helpers.ui import WITH_OPACITY, show_alert
from ui.tabs.tab_training import build_training_tab
from ui.tabs.training.sections.hyperparams_section import build_hyperparam_rows
from ui.tabs.training.sections.results_section import build_result_controls


logger = get_logger(__name__)

TRAIN_LABEL = "Train Model"
TRAINING_LABEL = "Training..."


def build_training_tab_with_logic(
    page: ft.Page,
    *,
    section_title,
    _mk_help_handler,
    session_provider: SessionProvider,
    get_base_url: Callable[[], str],
) -> Tuple[ft.Control, TrainingWorkflow]:
    """Build the full-page Training tab and return it with its workflow."""

    workflow = TrainingWorkflow(
        get_session_id=session_provider.get,
        get_base_url=get_base_url,
        alert=lambda msg: show_alert(page, msg),
    )

    session_tf = ft.TextField(
        label="Active Session ID",
        value=session_provider.get(),
        hint_text="No active session",
        read_only=True,
        filled=True,
    )
    target_tf = ft.TextField(
        label="Target Column (optional)",
        hint_text="Leave empty to use the last column",
        on_change=lambda e: workflow.set_target(e.control.value),
    )

    def on_model_change(e):
        value = getattr(e.control, "value", None)

        async def _select():
            await workflow.select_model(value)

        schedule_task(page, _select)

    model_dd = ft.Dropdown(
        label="Select Model",
        hint_text="Pick a model",
        options=[ft.dropdown.Option(m) for m in MODEL_CHOICES],
        on_change=on_model_change,
    )

    hp_host = ft.Column(spacing=8)
    results_host = ft.Column(spacing=8)
    hyperparams_section_ref: Dict[str, Any] = {}
    results_section_ref: Dict[str, Any] = {}

    async def on_train():
        await workflow.submit()

    train_btn = ft.ElevatedButton(
        TRAIN_LABEL,
        icon=TRAIN_ICON,
        width=760,
        height=44,
        on_click=lambda e: schedule_task(page, on_train),
    )

    def render_hyperparams() -> None:
        hp_host.controls = build_hyperparam_rows(workflow.hyperparameters, workflow.set_param)
        section = hyperparams_section_ref.get("control")
        if section is not None:
            section.visible = bool(workflow.hyperparameters)

    def render_loading() -> None:
        train_btn.disabled = workflow.loading
        train_btn.text = TRAINING_LABEL if workflow.loading else TRAIN_LABEL

    def render_result() -> None:
        result = workflow.result
        section = results_section_ref.get("control")
        if result is None:
            results_host.controls = []
            if section is not None:
                section.visible = False
            return
        results_host.controls = build_result_controls(result, BORDER_BASE=BORDER_BASE, WITH_OPACITY=WITH_OPACITY)
        if section is not None:
            section.visible = True

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

    tab = build_training_tab(
        section_title=section_title,
        ICONS=ICONS,
        BORDER_BASE=BORDER_BASE,
        WITH_OPACITY=WITH_OPACITY,
        _mk_help_handler=_mk_help_handler,
        session_tf=session_tf,
        target_tf=target_tf,
        model_dd=model_dd,
        hp_host=hp_host,
        train_btn=train_btn,
        results_host=results_host,
        hyperparams_section_ref=hyperparams_section_ref,
        results_section_ref=results_section_ref,
    )
    return tab, workflow
