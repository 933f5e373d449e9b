"""Gradio UI for CHT-Gen."""

import logging

import gradio as gr

from chtgen.core.clients import GenerationClient, create_client
from chtgen.core.config import CHTGenConfig, config

from .components import ResultPanelUI
from .handlers import (
    copy_sheets,
    copy_tags,
    generate_assets,
    refresh_copy_labels,
    update_submit_button,
)
from .handlers.export import COPY_TO_CLIPBOARD_JS
from .models import (
    APP_SUBTITLE,
    APP_TITLE,
    ARTICLE_PLACEHOLDER,
    GENERATE_LABEL,
)
from .state import cleanup_ui_state, initialize_ui_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CUSTOM_CSS = """
.chtgen-status {
    min-height: 24rem;
    display: flex;
    flex-direction: column;
    align-items: center;
    justify-content: center;
    text-align: center;
    border: 2px dashed #374151;
    border-radius: 8px;
    padding: 16px;
}
.chtgen-empty { color: #6b7280; font-size: 1.1rem; }
.chtgen-error { color: #fca5a5; background: rgba(127, 29, 29, 0.3); border-color: #b91c1c; }
.chtgen-spinner-ring {
    width: 48px;
    height: 48px;
    border: 4px solid #374151;
    border-top-color: #22d3ee;
    border-radius: 50%;
    animation: chtgen-spin 1s linear infinite;
}
@keyframes chtgen-spin { to { transform: rotate(360deg); } }
.chtgen-image { aspect-ratio: 16 / 9; overflow: hidden; border-radius: 8px; background: #111827; }
.chtgen-image img { width: 100%; height: 100%; object-fit: cover; }
.chtgen-tags {
    font-family: monospace;
    padding: 12px;
    border: 1px solid #374151;
    border-radius: 8px;
    word-break: break-word;
}
"""

# Timer period for reverting "Copied!" labels
COPY_LABEL_REFRESH_SECONDS = 0.5


def create_ui(client: GenerationClient, app_config: CHTGenConfig = config) -> gr.Blocks:
    """Create the Gradio UI.

    Args:
        client: Service client shared by all sessions
        app_config: Application configuration

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title=f"{APP_TITLE} - {APP_SUBTITLE}", css=CUSTOM_CSS)

    with app:
        # Session state - one instance per user, cleaned up when the session ends
        ui_state = gr.State(
            initialize_ui_state(feedback_seconds=app_config.copy_feedback_seconds),
            delete_callback=cleanup_ui_state,
        )

        gr.Markdown(
            f"""
            # {APP_TITLE}
            ### {APP_SUBTITLE}
            """
        )

        with gr.Row():
            with gr.Column(scale=1):
                gr.Markdown("## 1. Paste Your Article")
                article_input = gr.Textbox(
                    label="Article",
                    placeholder=ARTICLE_PLACEHOLDER,
                    lines=16,
                    max_lines=40,
                )
                submit_btn = gr.Button(GENERATE_LABEL, variant="primary", interactive=False)

            with gr.Column(scale=1):
                gr.Markdown("## 2. Get Your Assets")
                panel = ResultPanelUI()

        def on_generate(article_text, state):
            yield from generate_assets(
                article_text,
                state,
                client,
                min_length=app_config.min_article_length,
                downloads_dir=app_config.downloads_dir,
            )

        # Ticks only while a "Copied!" label is showing
        copy_label_timer = gr.Timer(COPY_LABEL_REFRESH_SECONDS, active=False)

        # Event handlers

        article_input.change(
            fn=update_submit_button,
            inputs=[article_input, ui_state],
            outputs=[submit_btn],
        )

        submit_btn.click(
            fn=on_generate,
            inputs=[article_input, ui_state],
            outputs=[article_input, submit_btn, *panel.get_output_components(), ui_state],
        )

        panel.copy_tags.click(
            fn=None,
            inputs=[panel.tags_text],
            js=COPY_TO_CLIPBOARD_JS,
        ).then(
            fn=copy_tags,
            inputs=[ui_state],
            outputs=[panel.copy_tags, copy_label_timer, ui_state],
        )

        panel.copy_sheets.click(
            fn=None,
            inputs=[panel.sheets_text],
            js=COPY_TO_CLIPBOARD_JS,
        ).then(
            fn=copy_sheets,
            inputs=[ui_state],
            outputs=[panel.copy_sheets, copy_label_timer, ui_state],
        )

        copy_label_timer.tick(
            fn=refresh_copy_labels,
            inputs=[ui_state],
            outputs=[panel.copy_tags, panel.copy_sheets, copy_label_timer, ui_state],
            show_progress="hidden",
        )

    return app


def main():
    """Main entry point for the application."""
    logging.getLogger().setLevel(config.log_level.upper())
    logger.info(f"Starting {APP_TITLE}...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    # Fails fast without an API key
    client = create_client(config)

    app = create_ui(client, config)

    logger.info(f"Launching Gradio UI on {config.server_name}:{config.server_port}")

    app.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
        # Gradio only serves files from cwd, the temp dir, or allowed_paths
        allowed_paths=[str(config.downloads_dir)] if config.downloads_dir else None,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
