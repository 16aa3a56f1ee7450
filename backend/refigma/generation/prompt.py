"""Prompt template for landing-page copy generation."""

from __future__ import annotations

CONTENT_SCHEMA = """{
  "hero": {
    "title": string,
    "subtitle": string,
    "primaryCta": string,
    "secondaryCta": string,
    "assurance": string,
    "highlights": [string, string, string]
  },
  "metrics": [
    { "value": string, "label": string },
    { "value": string, "label": string },
    { "value": string, "label": string }
  ],
  "testimonial": {
    "heading": string,
    "subtitle": string,
    "quote": string,
    "bullets": [string, string, string],
    "attribution": string,
    "attributionRole": string,
    "callout": string
  },
  "cta": {
    "title": string,
    "subtitle": string,
    "primaryCta": string,
    "secondaryCta": string
  }
}"""


def build_prompt(user_prompt: str) -> str:
    """Embed the user's description and the expected JSON structure."""
    return (
        "You are an AI copywriter and information architect helping design a landing page "
        "inside a design tool.\n"
        f'Use the following description to understand the context: "{user_prompt}".\n'
        "Reply ONLY in JSON with no extra text, using this structure:\n"
        f"{CONTENT_SCHEMA}\n"
        "Fill every field with relevant sentences. Avoid unnecessary special characters."
    )
