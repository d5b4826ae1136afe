"""Unit tests for helpers/ui.py.

Tests cover:
- WITH_OPACITY function
- labeled_value / link_text span layout
- open_url and show_alert against a stand-in page
"""

import flet as ft

from helpers.ui import (
    WITH_OPACITY,
    labeled_value,
    link_text,
    make_empty_placeholder,
    open_url,
    section_title,
    show_alert,
)


class TestWithOpacity:
    def test_returns_something_for_color(self):
        assert WITH_OPACITY(0.5, "#FF0000") is not None

    def test_handles_zero_and_full_opacity(self):
        assert WITH_OPACITY(0.0, "#FF0000") is not None
        assert WITH_OPACITY(1.0, "#FF0000") is not None


class TestTextHelpers:
    def test_labeled_value_spans(self):
        text = labeled_value("Model", "KMeans")
        assert [s.text for s in text.spans] == ["Model: ", "KMeans"]

    def test_labeled_value_none_is_blank(self):
        text = labeled_value("Type", None)
        assert text.spans[1].text == ""

    def test_link_text_carries_url(self):
        text = link_text("HuggingFace File", "https://huggingface.co/x/model.pkl")
        span = text.spans[0]
        assert span.text == "HuggingFace File"
        assert span.url == "https://huggingface.co/x/model.pkl"

    def test_section_title_with_help(self):
        row = section_title("Model", ft.Icons.SCIENCE if hasattr(ft, "Icons") else "science", "help me")
        assert isinstance(row, ft.Row)
        assert len(row.controls) == 3

    def test_placeholder_contains_text(self):
        ph = make_empty_placeholder("No results yet", None)
        texts = [c for c in ph.content.controls if isinstance(c, ft.Text)]
        assert texts[0].value == "No results yet"


class TestPageHelpers:
    def test_open_url_targets_new_window(self, page):
        open_url(page, "https://example.com/model.pkl")
        assert page.launched == [("https://example.com/model.pkl", {"web_window_name": "_blank"})]

    def test_show_alert_opens_modal_dialog(self, page):
        dlg = show_alert(page, "Please select a model first!")
        assert page.opened == [dlg]
        assert dlg.modal is True
        assert dlg.content.value == "Please select a model first!"

        dlg.actions[0].on_click(None)
        assert dlg.open is False
