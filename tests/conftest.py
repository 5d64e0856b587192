"""Shared fixtures: a canned model response and a stand-in for the OpenAI client."""

from types import SimpleNamespace

import pytest


SAMPLE_OUTPUT = """# Summary
- Generated 2 test cases for the login flow.
- High-risk areas: credential validation.

# Test Case List

| ID | Title | Type | Risk | Tags | Preconditions | Steps | Expected Result |
|----|-------|------|------|------|---------------|-------|-----------------|
| TC-001 | Login with valid credentials | Positive | High | @smoke | User is registered<br>On login page | 1. Enter email<br/>2. Click "Login" | Dashboard is shown |
| TC-002 | Login with invalid password | Negative | Low | @negative | User is registered | 1. Enter bad password | Inline error |

# Cucumber Feature Skeleton

Feature: User login

  @smoke @tc_001_login_valid
  Scenario: Login with valid credentials
    Given the user is on the login page

# Step Definition Skeleton (Optional)

```java
package com.example.tests.steps;

public class LoginSteps {
}
```
"""


class FakeCompletions:
    def __init__(self, content="# Summary\nok", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeClient:
    def __init__(self, completions):
        self.chat = SimpleNamespace(completions=completions)


@pytest.fixture
def sample_output():
    return SAMPLE_OUTPUT


@pytest.fixture
def completions():
    return FakeCompletions()


@pytest.fixture
def fake_client(completions):
    return FakeClient(completions)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    return "sk-test"
