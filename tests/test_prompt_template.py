"""Tests for prompt assembly."""

from models import DetailLevel, FormState, TestFocus
from prompt_template import PROMPT_TEMPLATE, build_prompt


class TestBuildPrompt:
    def test_contains_every_field_value(self):
        form = FormState(
            user_story="As a shopper I want a cart",
            system_url="https://shop.example.com",
            test_focus=TestFocus.BUSINESS_RULES,
            detail_level=DetailLevel.HIGH,
        )
        prompt = build_prompt(form)
        assert "USER_STORY: As a shopper I want a cart" in prompt
        assert "SYSTEM_UNDER_TEST_URL: https://shop.example.com" in prompt
        assert "TEST_FOCUS: Business Rules" in prompt
        assert "DETAIL_LEVEL: high" in prompt

    def test_starts_with_template_and_ends_with_request(self):
        prompt = build_prompt(FormState())
        assert prompt.startswith(PROMPT_TEMPLATE)
        assert prompt.endswith("Please generate the output now.")

    def test_values_are_not_escaped(self):
        form = FormState(user_story='Line one\n<b>"quoted"</b> | pipe')
        assert 'USER_STORY: Line one\n<b>"quoted"</b> | pipe\n' in build_prompt(form)

    def test_blank_story_is_not_rejected_here(self):
        prompt = build_prompt(FormState(user_story="   "))
        assert "USER_STORY:    \n" in prompt

    def test_template_lists_sections_in_order(self):
        order = [PROMPT_TEMPLATE.index(f"# {name}\n") for name in
                 ("Summary", "Test Case List", "Cucumber Feature Skeleton",
                  "Step Definition Skeleton (Optional)")]
        assert order == sorted(order)
