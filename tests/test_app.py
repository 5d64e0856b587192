"""Tests for the Streamlit page, driven through streamlit's AppTest."""

from pathlib import Path

import pytest
import streamlit
from streamlit.testing.v1 import AppTest

import generation

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")

SECTION_TITLES = [
    "Summary",
    "Test Case List",
    "Cucumber Feature Skeleton",
    "Step Definition Skeleton (Optional)",
]


@pytest.fixture
def page(api_key, monkeypatch, fake_client):
    monkeypatch.setattr(generation, "make_client", lambda key: fake_client)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def _markdown(at):
    return "\n".join(m.value for m in at.markdown)


def _download_keys(at):
    return [d.key for d in at.get("download_button")]


class TestIdlePage:
    def test_placeholder_and_enabled_button(self, page):
        assert "Your generated test cases will appear here." in _markdown(page)
        assert page.button[0].label == "✨ Generate Test Cases"
        assert page.button[0].disabled is False
        assert _download_keys(page) == []

    def test_form_starts_with_defaults(self, page):
        assert page.text_input(key="system_url").value == "https://www.example-app.com"
        assert page.selectbox(key="test_focus").value == "UI/E2E"
        assert page.selectbox(key="detail_level").value == "medium"


class TestSuccessfulRun:
    def test_sections_and_downloads(self, page, completions, sample_output):
        completions.content = sample_output
        page.button[0].click().run()

        assert not page.exception
        assert [s.value for s in page.subheader] == SECTION_TITLES
        assert _download_keys(page) == [
            "dl_pdf",
            "dl_1_testrail-import.csv",
            "dl_2_user-login.feature",
            "dl_3_LoginSteps.java",
        ]
        assert len(completions.calls) == 1
        assert page.session_state["app_state"].is_loading is False
        assert page.button[0].disabled is False

    def test_form_edits_reach_the_prompt(self, page, completions):
        page.text_input(key="system_url").set_value("https://shop.example.com")
        page.selectbox(key="test_focus").set_value("API")
        page.button[0].click().run()

        prompt = completions.calls[0]["messages"][0]["content"]
        assert "SYSTEM_UNDER_TEST_URL: https://shop.example.com" in prompt
        assert "TEST_FOCUS: API" in prompt

    def test_button_disabled_while_request_runs(self, page, completions, sample_output, monkeypatch):
        # keep the run that performs the request on screen instead of rerunning
        monkeypatch.setattr(streamlit, "rerun", lambda *args, **kwargs: None)
        completions.content = sample_output
        page.button[0].click().run()

        assert page.button[0].disabled is True
        assert page.button[0].label == "Generating..."
        assert len(completions.calls) == 1

        page.run()
        assert page.button[0].disabled is False
        assert [s.value for s in page.subheader] == SECTION_TITLES
        assert len(completions.calls) == 1


class TestFailedRun:
    def test_blank_story_shows_failure_panel(self, page, completions):
        page.text_area(key="user_story").set_value("   ")
        page.button[0].click().run()

        text = _markdown(page)
        assert "Generation Failed" in text
        assert "User Story cannot be empty." in text
        assert [s.value for s in page.subheader] == []
        assert _download_keys(page) == []
        assert completions.calls == []

    def test_failure_replaces_previous_output(self, page, completions, sample_output):
        completions.content = sample_output
        page.button[0].click().run()
        assert page.subheader

        completions.error = RuntimeError("service unavailable")
        page.button[0].click().run()
        assert "service unavailable" in _markdown(page)
        assert [s.value for s in page.subheader] == []
        assert page.session_state["app_state"].output is None

    def test_unexpected_error_is_shown_once_and_not_resent(self, page, completions):
        completions.error = ValueError("malformed response from proxy")
        page.button[0].click().run()

        assert not page.exception
        assert "malformed response from proxy" in _markdown(page)
        state = page.session_state["app_state"]
        assert state.is_loading is False
        assert state.error == "malformed response from proxy"

        page.text_input(key="system_url").set_value("https://other.example.com").run()
        assert len(completions.calls) == 1
