# models.py
# Plain data shapes shared by the prompt builder, parser, exporters and UI.

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TestFocus(str, Enum):
    __test__ = False  # not a pytest class

    UI_E2E = "UI/E2E"
    API = "API"
    BUSINESS_RULES = "Business Rules"


class DetailLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_USER_STORY = (
    "As a registered user, I want to log in with my email and password so that "
    "I can access my account dashboard.\n"
    "AC:\n"
    "– Valid credentials → redirect to dashboard and show user name\n"
    "– Invalid password → show inline error and stay on login page"
)
DEFAULT_SYSTEM_URL = "https://www.example-app.com"


@dataclass(frozen=True)
class FormState:
    """What the user typed into the form."""
    user_story: str = DEFAULT_USER_STORY
    system_url: str = DEFAULT_SYSTEM_URL
    test_focus: TestFocus = TestFocus.UI_E2E
    detail_level: DetailLevel = DetailLevel.MEDIUM


@dataclass
class ParsedTable:
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class ParsedSection:
    title: str
    raw_content: str
    table: Optional[ParsedTable] = None
