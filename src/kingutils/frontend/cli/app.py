"""Minimal Textual app for encrypting and decrypting text envelopes.

Start here with `python -m kingutils.frontend.cli.app`
"""

from __future__ import annotations

import logging

from pyperclip import PyperclipException
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Static
from textual.logging import TextualHandler

from kingutils.core.exceptions import InitializationError, KingUtilsError
from kingutils.frontend.cli.clipboard import copy_to_clipboard, paste_from_clipboard
from kingutils.frontend.cli.context import AppContext, build_context
from kingutils.frontend.cli.logging_config import configure_logging
from kingutils.security.envelope import decrypt_string, encrypt_string

logger = logging.getLogger(__name__)


class KingUtilsApp(App):
    """Text in, password, envelope out (and back)."""

    TITLE = "KingUtils"

    CSS = """
    #main { border: heavy $surface; padding: 0 1; }
    .section-label { padding: 0 1; color: $text-muted; }
    #buttons { height: auto; }
    #status { padding: 0 1 1 1; height: 3; color: $text-muted; }
    """

    # Input widgets swallow printable keys and some ctrl keys, so shortcuts
    # are ctrl chords bound with priority.
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+e", "encrypt", "Encrypt", priority=True),
        Binding("ctrl+d", "decrypt", "Decrypt", priority=True),
        Binding("ctrl+y", "copy", "Copy", priority=True),
        Binding("ctrl+g", "paste", "Paste", priority=True),
        Binding("ctrl+l", "clear", "Clear", priority=True),
    ]

    def __init__(self, ctx: AppContext | None = None):
        self.ctx = ctx or build_context()
        super().__init__()

        self.text_input: Input | None = None
        self.password_input: Input | None = None
        self.envelope_input: Input | None = None
        self.status: Static | None = None
        self.last_status: str = ""

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="main"):
            yield Static("Text", classes="section-label")
            self.text_input = Input(placeholder="plaintext", id="text")
            yield self.text_input
            yield Static("Password", classes="section-label")
            self.password_input = Input(placeholder="password", password=True, id="password")
            yield self.password_input
            yield Static("Envelope", classes="section-label")
            self.envelope_input = Input(placeholder="salt U iterations U hash U ciphertext", id="envelope")
            yield self.envelope_input
            with Horizontal(id="buttons"):
                yield Button("Encrypt (^E)", id="encrypt", variant="primary")
                yield Button("Decrypt (^D)", id="decrypt")
                yield Button("Copy (^Y)", id="copy")
                yield Button("Clear (^L)", id="clear")
            self.status = Static("", id="status")
            yield self.status
        yield Footer()

    def on_mount(self) -> None:
        s = self.ctx.settings
        self._set_status(
            f"salt {s.salt_length} bytes, {s.iterations} iterations, {s.hash_algorithm.name}"
        )
        self.set_focus(self.text_input)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {
            "encrypt": self.action_encrypt,
            "decrypt": self.action_decrypt,
            "copy": self.action_copy,
            "clear": self.action_clear,
        }
        action = actions.get(event.button.id or "")
        if action is not None:
            action()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_encrypt(self) -> None:
        password = self.password_input.value
        if not password:
            self._set_status("Enter a password first")
            return

        s = self.ctx.settings
        try:
            envelope = encrypt_string(
                self.text_input.value,
                password,
                salt_length=s.salt_length,
                iterations=s.iterations,
                hash_algorithm=s.hash_algorithm,
            )
        except KingUtilsError as exc:
            logger.warning("encrypt failed: %s", exc)
            self._set_status(f"Encrypt failed: {exc}")
            return

        self.envelope_input.value = envelope
        logger.info("encrypted %d characters", len(self.text_input.value))
        self._set_status(f"Encrypted ({len(envelope)} characters)")

    def action_decrypt(self) -> None:
        password = self.password_input.value
        envelope = self.envelope_input.value.strip()
        if not password or not envelope:
            self._set_status("Enter an envelope and its password first")
            return

        try:
            text = decrypt_string(envelope, password)
        except KingUtilsError as exc:
            logger.warning("decrypt failed: %s", exc)
            self._set_status(f"Decrypt failed: {exc}")
            return

        self.text_input.value = text
        logger.info("decrypted envelope of %d characters", len(envelope))
        self._set_status("Decrypted")

    def action_copy(self) -> None:
        envelope = self.envelope_input.value
        if not envelope:
            self._set_status("Nothing to copy")
            return
        try:
            copy_to_clipboard(envelope)
        except PyperclipException as exc:
            logger.warning("clipboard copy failed: %s", exc)
            self._set_status(f"Clipboard unavailable: {exc}")
            return
        self._set_status("Envelope copied to clipboard")

    def action_paste(self) -> None:
        try:
            self.envelope_input.value = paste_from_clipboard().strip()
        except PyperclipException as exc:
            logger.warning("clipboard paste failed: %s", exc)
            self._set_status(f"Clipboard unavailable: {exc}")
            return
        self._set_status("Envelope pasted from clipboard")

    def action_clear(self) -> None:
        self.text_input.value = ""
        self.password_input.value = ""
        self.envelope_input.value = ""
        self._set_status("Cleared")

    def _set_status(self, message: str) -> None:
        self.last_status = message
        if self.status is not None:
            self.status.update(message)


def main() -> None:
    """Load settings from the environment, configure logging and run the app."""
    try:
        ctx = build_context()
    except InitializationError as exc:
        raise SystemExit(f"kingutils: {exc}") from exc
    # stdout belongs to the terminal Textual draws on
    configure_logging(ctx.log_level, handler=TextualHandler())
    KingUtilsApp(ctx=ctx).run()


if __name__ == "__main__":  # pragma: no cover
    main()
