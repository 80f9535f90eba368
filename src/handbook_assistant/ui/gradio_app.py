"""
Gradio chat widget for the handbook assistant.

- Transcript and session id persist in browser local storage
- "Use Employee Handbook" toggles retrieval augmentation
- Sources render as a collapsible message under each reply
"""

from __future__ import annotations

import uuid
from typing import Any

import gradio as gr

from handbook_assistant.ui.client import ChatClient
from handbook_assistant.utils.config import load_config
from handbook_assistant.utils.logging import configure_logging

SOURCES_TITLE = "📚 Sources"


def new_session_id() -> str:
    return f"session_{uuid.uuid4().hex[:12]}"


def render_reply(reply: str, sources: list[str], show_sources: bool) -> list[dict[str, Any]]:
    """Chatbot messages for one assistant reply."""
    messages: list[dict[str, Any]] = [{"role": "assistant", "content": reply}]
    if show_sources and sources:
        messages.append({
            "role": "assistant",
            "content": "\n\n---\n\n".join(sources),
            "metadata": {"title": SOURCES_TITLE, "status": "done"},
        })
    return messages


async def handle_chat(
    message: str,
    history: list[dict[str, Any]] | None,
    use_handbook: bool,
    session_id: str | None,
    client: ChatClient,
) -> tuple[list[dict[str, Any]], list[dict[str, Any]], str, str]:
    """
    Send one message and extend the visible transcript.

    Returns:
        (chatbot history, stored history, cleared input, session id)
    """
    history = list(history or [])
    session_id = session_id or new_session_id()
    if not message or not message.strip():
        return history, history, "", session_id

    history.append({"role": "user", "content": message})
    result = await client.send(message, session_id, use_handbook)
    history.extend(render_reply(result.reply, result.sources, use_handbook))
    return history, history, "", session_id


def handle_clear() -> tuple[list, list, str]:
    """Clear the visible transcript and start a fresh session."""
    return [], [], new_session_id()


def create_app(
    backend_url: str | None = None,
    title: str = "Employee Handbook Assistant",
) -> gr.Blocks:
    """Create the Gradio application."""
    client = ChatClient(backend_url or load_config().backend_url)

    async def on_submit(message, history, use_handbook, session_id):
        return await handle_chat(message, history, use_handbook, session_id, client)

    with gr.Blocks(title=title, theme=gr.themes.Soft()) as app:
        gr.Markdown(f"# {title}")

        stored_history = gr.BrowserState([], storage_key="handbook_assistant_messages")
        stored_session = gr.BrowserState("", storage_key="handbook_assistant_session")

        with gr.Row():
            clear_btn = gr.Button("🧹 Clear Chat", variant="secondary", scale=1)
            handbook_toggle = gr.Checkbox(value=True, label="Use Employee Handbook", scale=3)

        chatbot = gr.Chatbot(type="messages", label="Chat", height=450)

        with gr.Row():
            with gr.Column(scale=5):
                msg_input = gr.Textbox(
                    placeholder="Ask about company policies, benefits, etc...",
                    show_label=False,
                    container=False,
                )
            with gr.Column(scale=1, min_width=80):
                send_btn = gr.Button("Send", variant="primary")

        # Event handlers
        chat_inputs = [msg_input, chatbot, handbook_toggle, stored_session]
        chat_outputs = [chatbot, stored_history, msg_input, stored_session]
        msg_input.submit(fn=on_submit, inputs=chat_inputs, outputs=chat_outputs)
        send_btn.click(fn=on_submit, inputs=chat_inputs, outputs=chat_outputs)

        clear_btn.click(
            fn=handle_clear,
            outputs=[chatbot, stored_history, stored_session],
        )

        app.load(fn=lambda history: history, inputs=[stored_history], outputs=[chatbot])

    return app


def launch_app(
    host: str = "127.0.0.1",
    port: int = 7860,
    share: bool = False,
    **kwargs,
) -> None:
    """Launch the Gradio application."""
    config = load_config()
    configure_logging(config.log_level)
    app = create_app(config.backend_url)
    app.launch(
        server_name=host,
        server_port=port,
        share=share,
        **kwargs,
    )


if __name__ == "__main__":
    launch_app()
