"""NiceGUI onboarding chat page."""

from nicegui import events, ui

from onboarding_chat.client.backend import BackendClient, get_backend_client
from onboarding_chat.models.schemas import Role, Turn, UploadedFile
from onboarding_chat.session.controller import SessionController
from onboarding_chat.session.state import accepts_input

CUSTOM_CSS = """
<style>
    body { background: #0f172a; min-height: 100vh; }

    .app-container {
        background: rgba(30, 41, 59, 0.85);
        border-radius: 16px;
        box-shadow: 0 8px 32px rgba(0, 0, 0, 0.35);
        overflow: hidden;
    }

    .message-user {
        background: #0ea5e9;
        color: #0f172a;
        border-radius: 18px 18px 4px 18px;
    }

    .message-assistant {
        background: #334155;
        color: #e2e8f0;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #94a3b8;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main onboarding page. One session per visit; nothing survives a reload."""
    ui.add_head_html(CUSTOM_CSS)
    backend: BackendClient = get_backend_client()

    messages_container: ui.column
    input_field: ui.input
    send_btn: ui.button
    uploader: ui.upload

    def render_turn(turn: Turn) -> None:
        is_user = turn.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                ui.icon("smart_toy").classes("text-sky-400 text-2xl")
            with ui.element("div").classes(f"max-w-[75%] px-4 py-3 {bubble}"):
                if is_user:
                    ui.label(turn.content).classes("text-sm whitespace-pre-wrap")
                else:
                    ui.markdown(turn.content).classes("text-sm leading-relaxed")
                if turn.action_link:
                    ui.link("Start Interview →", turn.action_link).classes(
                        "inline-block mt-4 bg-sky-400 text-slate-900 font-bold "
                        "py-2 px-4 rounded-lg no-underline"
                    )
            if is_user:
                ui.icon("person").classes("text-sky-400 text-2xl")

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            ui.icon("smart_toy").classes("text-sky-400 text-2xl")
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("gap-1"):
                    for _ in range(3):
                        ui.element("div").classes("typing-dot")

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            for turn in session.turns:
                render_turn(turn)
            if session.sending:
                render_typing_indicator()
        busy = not accepts_input(session.state)
        input_field.set_enabled(not session.sending and not session.is_complete)
        send_btn.set_enabled(not busy)
        uploader.set_enabled(not busy)

    def reset_selection() -> None:
        uploader.reset()

    session = SessionController(backend, on_change=refresh, on_selection_reset=reset_selection)

    async def send_message() -> None:
        await session.submit_text()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        picked = UploadedFile(
            name=e.file.name,
            content=await e.file.read(),
            content_type=e.file.content_type or "application/octet-stream",
        )
        await session.submit_file(picked)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full px-5 py-4 items-center gap-3 border-b border-slate-700"):
            ui.icon("smart_toy").classes("text-sky-400 text-3xl")
            with ui.column().classes("gap-0"):
                ui.label("Onboarding Assistant").classes("text-lg font-semibold text-white")
                ui.label("Online").classes("text-xs text-slate-300")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full"),
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-center border-t border-slate-700"):
            uploader = (
                ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                .props(f'accept="{backend.config.accepted_file_types}" flat dense')
                .classes("w-40")
                .tooltip("Upload Resume")
            )
            input_field = (
                ui.input(placeholder="Type your message...")
                .bind_value(session, "draft")
                .props("dark borderless dense")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = ui.button(icon="send", on_click=send_message).props("round unelevated")

    refresh()
