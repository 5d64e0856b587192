# generation.py
# One round trip to the OpenAI Chat Completions API. No retries, no streaming.

import logging
from openai import OpenAI

import settings
from models import FormState
from prompt_template import build_prompt

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Anything that stops a generation; the message is shown to the user as is."""


class ConfigurationError(GenerationError):
    pass


class ValidationError(GenerationError):
    pass


class RemoteError(GenerationError):
    pass


def make_client(api_key: str) -> OpenAI:
    return OpenAI(api_key=api_key, max_retries=0)


def generate(form: FormState, client=None) -> str:
    """
    Send the assembled prompt and return the model's text untouched.

    Raises ConfigurationError when the API key is missing and ValidationError
    when the user story is blank, both before anything goes over the wire.
    Anything that goes wrong on the call itself comes back as RemoteError
    with the same message.
    """
    api_key = settings.get_api_key()
    if not api_key:
        raise ConfigurationError(f"{settings.API_KEY_ENV} environment variable not set")
    if not form.user_story.strip():
        raise ValidationError("User Story cannot be empty.")

    if client is None:
        client = make_client(api_key)
    prompt = build_prompt(form)
    logger.info("Requesting test design from %s (%d prompt chars)", settings.MODEL, len(prompt))

    try:
        resp = client.chat.completions.create(
            model=settings.MODEL, temperature=settings.TEMPERATURE,
            messages=[{"role": "user", "content": prompt}]
        )
        text = resp.choices[0].message.content if resp.choices else None
    except Exception as e:
        # SDK errors and malformed responses alike
        logger.error("Generation request failed: %s", e)
        raise RemoteError(str(e) or type(e).__name__) from e

    if text is None:
        raise RemoteError("The model returned an empty response.")
    return text
