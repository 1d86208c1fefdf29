"""Prompt templates for enhancing README feature lists."""

from __future__ import annotations

from enum import Enum
from typing import Union


class OutputFormat(str, Enum):
    """Shape of the enhanced Markdown."""

    LIST = "list"
    TABLE = "table"


COMMON_INSTRUCTIONS = """
You are an expert GitHub README writer specializing in making technical documentation visually engaging, scannable, and compelling. Your task is to take a plain Markdown list of features and enhance it.

RULES:
1.  Analyze the input, which is a Markdown list under a header like "## Key Features".
2.  For each list item, you must:
    a. Make the feature name bold.
    b. Add one or two relevant emojis right after the feature name.
    c. Write a concise, compelling description for the feature.
3.  Also add a relevant emoji to the main header (e.g., "## Key Features" becomes "## ✨ Key Features").
4.  Preserve the original feature names. Do not rephrase them.
5.  Return ONLY the modified Markdown content. Do not include any explanations, greetings, or markdown code fences like ```markdown.
"""

EXAMPLE_INPUT = """INPUT:
## Key Features
- Astro v5 Fast
- Tailwind v4
- Accessible, semantic HTML markup
"""

LIST_INSTRUCTIONS = """6.  Format the output as a bulleted list, where each line looks like this: `- **Feature Name** 🚀 – Compelling description.`

---
EXAMPLE (LIST FORMAT)
---
{example_input}
OUTPUT:
## ✨ Key Features
- **Astro v5 Fast** 🚀 – Blazing-fast static site generation.
- **Tailwind v4** 🎨 – Utility-first styling at your fingertips.
- **Accessible, semantic HTML markup** ♿️ – WCAG-compliant, screen-reader friendly.
---

Now, transform the following README content into the ENHANCED LIST format:

""".format(example_input=EXAMPLE_INPUT)

TABLE_INSTRUCTIONS = """6.  Format the output as a three-column Markdown table with headers: "Feature", "Emoji 💡", and "Description".

---
EXAMPLE (TABLE FORMAT)
---
{example_input}
OUTPUT:
## ✨ Key Features

| Feature | Emoji 💡 | Description |
|---|---|---|
| **Astro v5 Fast** | 🚀 | Blazing-fast static site generation. |
| **Tailwind v4** | 🎨 | Utility-first styling at your fingertips. |
| **Accessible, semantic HTML markup** | ♿️ | WCAG-compliant, screen-reader friendly. |
---

Now, transform the following README content into the ENHANCED TABLE format:

""".format(example_input=EXAMPLE_INPUT)

FORMAT_INSTRUCTIONS = {
    OutputFormat.LIST: LIST_INSTRUCTIONS,
    OutputFormat.TABLE: TABLE_INSTRUCTIONS,
}


def build_prompt(content: str, output_format: Union[OutputFormat, str]) -> str:
    """Return the Gemini prompt for ``content`` in the requested format.

    The README content is appended verbatim at the very end of the prompt.
    Unknown formats fall back to the content itself.
    """
    try:
        fmt = OutputFormat(output_format)
    except (TypeError, ValueError):
        return content
    # Concatenation, not str.format: the content may contain braces.
    return "\n" + COMMON_INSTRUCTIONS + "\n" + FORMAT_INSTRUCTIONS[fmt] + content


__all__ = [
    "OutputFormat",
    "COMMON_INSTRUCTIONS",
    "LIST_INSTRUCTIONS",
    "TABLE_INSTRUCTIONS",
    "build_prompt",
]
