"""Tests for the compact training panel."""

from types import SimpleNamespace

import flet as ft
import pytest

import helpers.training_workflow as tw
from helpers.session import SessionProvider
from ui.tabs.training import compact_panel as cp


KMEANS_BODY = {
    "status": "ok",
    "problem_type": "clustering",
    "target_column": None,
    "model_name": "KMeans",
    "hyperparameters_used": {"n_clusters": 3},
    "metrics": {"inertia": 12.34, "labels": [0, 1, 1]},
    "model_path": "models/x.pkl",
    "hf_filename": "x.pkl",
    "huggingface_download_url": "https://huggingface.co/org/repo/resolve/main/x.pkl",
}


@pytest.fixture
def backend(monkeypatch):
    calls = {"train": []}

    async def fake_fetch(base_url, model_name):
        return {"n_clusters": 8, "init": "k-means++"}

    async def fake_train(base_url, **kwargs):
        calls["train"].append(kwargs)
        return calls.get("body", KMEANS_BODY)

    monkeypatch.setattr(tw, "fetch_default_hyperparameters_helper", fake_fetch)
    monkeypatch.setattr(tw, "train_model_helper", fake_train)
    return calls


def _build(page, session_id="abc123"):
    provider = SessionProvider(session_id, persist=False)
    return cp.build_compact_training_panel(page, session_provider=provider, get_base_url=lambda: "http://backend.test")


def _train(panel, find_controls):
    dd = find_controls(panel, ft.Dropdown)[0]
    dd.value = "KMeans"
    dd.on_change(SimpleNamespace(control=dd))
    find_controls(panel, ft.FilledButton, text=cp.TRAIN_LABEL)[0].on_click(None)


def _metric_rows(panel, find_controls):
    return [c for c in find_controls(panel, ft.Container) if isinstance(c.data, str)]


def test_placeholder_before_first_result(page, find_controls):
    panel, _ = _build(page)
    assert any(t.value == cp.NO_RESULTS_TEXT for t in find_controls(panel, ft.Text))
    assert panel.width == cp.PANEL_WIDTH


def test_hyperparameter_block_appears_after_model_selection(page, find_controls, backend):
    panel, workflow = _build(page)
    dd = find_controls(panel, ft.Dropdown)[0]
    dd.value = "KMeans"
    dd.on_change(SimpleNamespace(control=dd))

    fields = {tf.data: tf.value for tf in find_controls(panel, ft.TextField) if tf.data}
    assert fields == {"n_clusters": "8", "init": "k-means++"}
    assert workflow.hyperparameters == {"n_clusters": 8, "init": "k-means++"}


def test_only_numeric_scalar_metrics_are_listed(page, find_controls, backend):
    panel, _ = _build(page)
    _train(panel, find_controls)

    rows = _metric_rows(panel, find_controls)
    assert [r.data for r in rows] == ["inertia"]
    values = [t.value for t in find_controls(rows[0], ft.Text)]
    assert values == ["inertia", "12.3400"]


def test_auto_target_label_when_backend_inferred_target(page, find_controls, backend):
    panel, _ = _build(page)
    _train(panel, find_controls)

    spans = [[s.text for s in t.spans] for t in find_controls(panel, ft.Text) if t.spans]
    assert ["Target: ", cp.AUTO_TARGET_TEXT] in spans


def test_no_scalar_metrics_placeholder(page, find_controls, backend):
    backend["body"] = dict(KMEANS_BODY, metrics={"labels": [0, 1], "converged": True})
    panel, _ = _build(page)
    _train(panel, find_controls)

    assert _metric_rows(panel, find_controls) == []
    assert any(t.value == cp.NO_SCALAR_METRICS_TEXT for t in find_controls(panel, ft.Text))


def test_download_button_opens_url(page, find_controls, backend):
    panel, _ = _build(page)
    _train(panel, find_controls)

    btn = find_controls(panel, ft.ElevatedButton, text="Download Model")[0]
    btn.on_click(None)

    assert page.launched == [(KMEANS_BODY["huggingface_download_url"], {"web_window_name": "_blank"})]


def test_no_download_button_without_url(page, find_controls, backend):
    backend["body"] = dict(KMEANS_BODY, huggingface_download_url=None)
    panel, _ = _build(page)
    _train(panel, find_controls)

    assert find_controls(panel, ft.ElevatedButton, text="Download Model") == []


def test_failed_training_keeps_placeholder_and_alerts(page, find_controls, monkeypatch):
    async def fake_train(base_url, **kwargs):
        raise tw.BackendError("HTTP 400", status_code=400, detail="Session not found")

    monkeypatch.setattr(tw, "train_model_helper", fake_train)
    panel, workflow = _build(page)
    workflow.model = "KMeans"

    find_controls(panel, ft.FilledButton, text=cp.TRAIN_LABEL)[0].on_click(None)

    assert [d.content.value for d in page.opened] == ["Session not found"]
    assert any(t.value == cp.NO_RESULTS_TEXT for t in find_controls(panel, ft.Text))
