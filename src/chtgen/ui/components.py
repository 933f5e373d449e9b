"""Render functions and reusable components for the CHT-Gen Gradio interface.

Everything shown in the output column is derived from :class:`UIState` by
the pure functions in this module; handlers only decide *when* to re-render.
"""

import html

import gradio as gr

from .models import (
    COPIED_LABEL,
    COPY_SHEETS_LABEL,
    COPY_TAGS_LABEL,
    DOWNLOAD_LABEL,
    EMPTY_RESULT_MESSAGE,
    GENERATE_LABEL,
    GENERATING_LABEL,
    SHEETS_HINT,
    UIState,
    ViewName,
)


def select_view(state: UIState) -> ViewName:
    """Pick the single output view to show.

    Priority: loading, then error, then result, then the empty placeholder.
    """
    if state.is_loading:
        return "loading"
    if state.error:
        return "error"
    if state.result is not None:
        return "result"
    return "empty"


def render_status(state: UIState) -> str:
    """HTML for the spinner, error banner or placeholder (empty for the result view)."""
    view = select_view(state)

    if view == "loading":
        return (
            '<div class="chtgen-status chtgen-spinner" role="status">'
            '<div class="chtgen-spinner-ring"></div>'
            "<p>Generating your header image and tags...</p>"
            "</div>"
        )
    if view == "error":
        return (
            '<div class="chtgen-status chtgen-error" role="alert">'
            "<strong>Error</strong>"
            f"<p>{html.escape(state.error)}</p>"
            "</div>"
        )
    if view == "empty":
        return (
            '<div class="chtgen-status chtgen-empty">'
            f"<p>{EMPTY_RESULT_MESSAGE}</p>"
            "</div>"
        )
    return ""


def render_result(state: UIState) -> str:
    """HTML for the generated header image and tag string (empty unless showing a result)."""
    if select_view(state) != "result":
        return ""

    result = state.result
    return (
        '<div class="chtgen-result">'
        "<h3>Header Image</h3>"
        '<div class="chtgen-image">'
        f'<img src="{html.escape(result.image_url, quote=True)}" alt="Generated header">'
        "</div>"
        "<h3>SEO Tags</h3>"
        f'<div class="chtgen-tags">{html.escape(result.tags)}</div>'
        "</div>"
    )


def submit_label(state: UIState) -> str:
    """Label of the submit button."""
    return GENERATING_LABEL if state.is_loading else GENERATE_LABEL


def submit_enabled(state: UIState, article_text: str | None) -> bool:
    """The submit button is disabled while loading or while the textarea is empty."""
    return not state.is_loading and bool(article_text)


def copy_tags_label(state: UIState, now: float | None = None) -> str:
    """Label of the Copy Tags button."""
    return COPIED_LABEL if state.tags_copied.is_active(now) else COPY_TAGS_LABEL


def copy_sheets_label(state: UIState, now: float | None = None) -> str:
    """Label of the Copy for Sheets button."""
    return COPIED_LABEL if state.sheets_copied.is_active(now) else COPY_SHEETS_LABEL


class ResultPanelUI:
    """Output column: status area, result view and export actions.

    The export group is only visible when :func:`select_view` returns
    ``"result"``.
    """

    def __init__(self):
        """Create the output components inside the current Blocks context."""
        self.status = gr.HTML(value=render_status(UIState()))

        with gr.Group(visible=False) as self.result_group:
            self.result = gr.HTML(value="")

            with gr.Row():
                self.download = gr.DownloadButton(
                    label=DOWNLOAD_LABEL,
                    value=None,
                    variant="primary",
                )
                self.copy_tags = gr.Button(COPY_TAGS_LABEL, variant="secondary")

            self.copy_sheets = gr.Button(COPY_SHEETS_LABEL, variant="secondary")
            gr.Markdown(f"<small>{SHEETS_HINT}</small>")

            # Clipboard payloads, read by the client-side copy hooks
            self.tags_text = gr.Textbox(visible=False)
            self.sheets_text = gr.Textbox(visible=False)

    def get_output_components(self) -> list[gr.components.Component]:
        """Components updated by :meth:`render`, in order."""
        return [
            self.status,
            self.result_group,
            self.result,
            self.download,
            self.copy_tags,
            self.copy_sheets,
            self.tags_text,
            self.sheets_text,
        ]

    @staticmethod
    def render(state: UIState) -> tuple:
        """Updates for :meth:`get_output_components` derived from state."""
        showing_result = select_view(state) == "result"
        return (
            render_status(state),
            gr.update(visible=showing_result),
            render_result(state),
            gr.update(value=state.download_path if showing_result else None),
            gr.update(value=copy_tags_label(state)),
            gr.update(value=copy_sheets_label(state)),
            state.result.tags if showing_result else "",
            state.result.sheets_row() if showing_result else "",
        )
