"""Streamlit UI entrypoint."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from readme_emojifier.config import get_settings
from readme_emojifier.core.exceptions import ConfigurationError, EmojifierError
from readme_emojifier.core.llm_engine import GeminiClient
from readme_emojifier.core.prompt_builder import OutputFormat
from readme_emojifier.utils.logger import logger
from readme_emojifier.utils.validators import validate_readme_input

settings = get_settings()
PAGE_TITLE = settings.app.name
FAILURE_PREFIX = "Failed to generate content."

PLACEHOLDER = """## Key Features
- Astro v5 Fast
- Tailwind v4
- Accessible, semantic HTML markup"""


@dataclass
class GenerationOutcome:
    output: str = ""
    error: Optional[str] = None


def run_generation(
    client: GeminiClient,
    content: str,
    output_format: OutputFormat,
    loop: asyncio.AbstractEventLoop,
) -> GenerationOutcome:
    """Validate input, call Gemini once and turn failures into display text.

    ``loop`` is a long-lived loop running in another thread; the Gemini
    async transport binds to the loop it was first used on, so every
    request must go through the same one.
    """
    try:
        validate_readme_input(content)
    except EmojifierError as exc:
        return GenerationOutcome(error=exc.message)

    try:
        future = asyncio.run_coroutine_threadsafe(client.generate(content, output_format), loop)
        result = future.result()
    except EmojifierError as exc:
        return GenerationOutcome(error=f"{FAILURE_PREFIX} {exc.message}")
    return GenerationOutcome(output=result)


def start_background_loop() -> asyncio.AbstractEventLoop:
    loop = asyncio.new_event_loop()
    threading.Thread(target=loop.run_forever, name="gemini-event-loop", daemon=True).start()
    return loop


@st.cache_resource
def get_client() -> GeminiClient:
    return GeminiClient(settings.model)


@st.cache_resource
def get_event_loop() -> asyncio.AbstractEventLoop:
    """Start the loop shared by all sessions for Gemini calls."""
    return start_background_loop()


def init_session_state() -> None:
    if "output" not in st.session_state:
        st.session_state.output = ""
    if "error" not in st.session_state:
        st.session_state.error = None
    if "pending_format" not in st.session_state:
        st.session_state.pending_format = None


def request_generation(output_format: OutputFormat) -> None:
    st.session_state.pending_format = output_format


def render_controls() -> None:
    is_loading = st.session_state.pending_format is not None
    table_col, list_col = st.columns(2)
    with table_col:
        st.button(
            "Enhance as Table",
            key="enhance_table",
            disabled=is_loading,
            use_container_width=True,
            on_click=request_generation,
            args=(OutputFormat.TABLE,),
        )
    with list_col:
        st.button(
            "Enhance as List",
            key="enhance_list",
            disabled=is_loading,
            use_container_width=True,
            on_click=request_generation,
            args=(OutputFormat.LIST,),
        )


def render_result() -> None:
    if st.session_state.error:
        st.error(st.session_state.error)
    elif st.session_state.output:
        # st.code renders preformatted text with a copy-to-clipboard button
        st.code(st.session_state.output, language="markdown")
    else:
        st.subheader("Your enhanced README will appear here")
        st.caption("Choose an enhancement style to get started!")


def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, page_icon="✨", layout="wide")
    st.title(f"✨ {PAGE_TITLE}")
    st.caption(settings.app.tagline)

    try:
        client = get_client()
    except ConfigurationError as exc:
        logger.error("Cannot start: {}", exc.message)
        st.error(exc.message)
        st.stop()

    init_session_state()

    input_col, output_col = st.columns(2)
    with input_col:
        st.subheader("Your README Features")
        content = st.text_area(
            "README content",
            key="readme_input",
            height=320,
            placeholder=PLACEHOLDER,
            label_visibility="collapsed",
        )
        render_controls()

    with output_col:
        st.subheader("Enhanced Result")
        pending = st.session_state.pending_format
        if pending is not None:
            st.session_state.output = ""
            st.session_state.error = None
            with st.spinner("Performing AI magic... This might take a moment."):
                outcome = run_generation(client, content, pending, get_event_loop())
            st.session_state.output = outcome.output
            st.session_state.error = outcome.error
            st.session_state.pending_format = None
            st.rerun()
        render_result()


if __name__ == "__main__":
    main()
