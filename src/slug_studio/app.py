"""Main Textual application for slug-studio."""

from collections.abc import Iterable

from textual.app import App, ComposeResult, SystemCommand
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, Label, Select, Switch

from slug_studio.components import LogPanel, PreviewPanel, SlugForm
from slug_studio.models import Config, DocumentType, Language, SlugStatus
from slug_studio.utils.config import ConfigManager
from slug_studio.utils.urls import document_path
from slug_studio.utils.validator import SlugValidator


class SettingsScreen(ModalScreen[None]):
    """Modal screen for settings."""

    DEFAULT_CSS = """
    SettingsScreen {
        align: center middle;
    }

    SettingsScreen > Container {
        width: 60;
        height: auto;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }

    SettingsScreen .title {
        text-style: bold;
        margin-bottom: 1;
        color: $accent;
    }

    SettingsScreen .setting-row {
        height: 3;
        margin: 0;
    }

    SettingsScreen .setting-row Switch {
        margin-right: 1;
    }

    SettingsScreen .setting-row Label {
        padding-top: 1;
    }

    SettingsScreen .setting-row Select {
        width: 24;
        margin-left: 1;
    }

    SettingsScreen .url-label {
        color: $text-muted;
        height: 1;
        margin-top: 1;
    }

    SettingsScreen .buttons {
        height: auto;
        align: center middle;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    LANGUAGE_OPTIONS = [
        ("Norsk", Language.NO.value),
        ("English", Language.EN.value),
    ]

    DOCUMENT_TYPE_OPTIONS = [
        ("Page", DocumentType.PAGE.value),
        ("Artist", DocumentType.ARTIST.value),
        ("Event", DocumentType.EVENT.value),
    ]

    class ConfigChanged(Message):
        """Message sent when configuration changes."""

        def __init__(self, config: Config) -> None:
            self.config = config
            super().__init__()

    def __init__(self, config: Config) -> None:
        super().__init__()
        self._config = config

    def compose(self) -> ComposeResult:
        with Container():
            yield Label("⚙ Settings", classes="title")
            with Horizontal(classes="setting-row"):
                yield Switch(value=self._config.auto_generate, id="auto-generate")
                yield Label("Generate slug from title")
            with Horizontal(classes="setting-row"):
                yield Label("Language: ")
                yield Select(
                    self.LANGUAGE_OPTIONS,
                    value=self._config.language.value,
                    id="language",
                    allow_blank=False,
                )
            with Horizontal(classes="setting-row"):
                yield Label("Document type: ")
                yield Select(
                    self.DOCUMENT_TYPE_OPTIONS,
                    value=self._config.document_type.value,
                    id="document-type",
                    allow_blank=False,
                )
            yield Label("Site URL:", classes="url-label")
            yield Input(value=self._config.site_url, id="site-url")
            with Horizontal(classes="buttons"):
                yield Button("Done", id="close-btn", variant="primary")

    def on_switch_changed(self, event: Switch.Changed) -> None:
        if event.switch.id == "auto-generate":
            self._config.auto_generate = event.value
            self._notify_change()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        if event.select.id == "language":
            self._config.language = Language(event.value)
        elif event.select.id == "document-type":
            self._config.document_type = DocumentType(event.value)
        else:
            return
        self._notify_change()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "site-url" and event.value.strip():
            self._config.site_url = event.value.strip()
            self._notify_change()

    def _notify_change(self) -> None:
        self.post_message(self.ConfigChanged(self._config))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "close-btn":
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


class SlugStudioApp(App):
    """Main Textual application for editing document slugs."""

    TITLE = "slug-studio"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+g", "generate", "Generate", show=True),
        Binding("ctrl+n", "normalize", "Normalize", show=True),
        Binding("ctrl+s", "accept", "Accept", show=True),
        Binding("ctrl+p", "command_palette", "Commands", show=True),
        Binding("ctrl+l", "clear_log", "Clear Log", show=False),
        Binding("tab", "focus_next", show=False),
        Binding("shift+tab", "focus_previous", show=False),
    ]

    def __init__(
        self,
        initial_title: str | None = None,
        config_manager: ConfigManager | None = None,
    ) -> None:
        super().__init__()
        self.initial_title = initial_title
        self._config_manager = config_manager or ConfigManager()
        self._config = self._config_manager.load()
        self._current_slug = ""
        self._current_status = SlugStatus.EMPTY

        # Slugs accepted this session count as taken
        self.accepted: dict[str, str] = {}

    @property
    def config(self) -> Config:
        return self._config

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main-container"):
            yield SlugForm(
                initial_title=self.initial_title,
                auto_generate=self._config.auto_generate,
                validator=self._build_validator(),
            )
            yield PreviewPanel()
            yield LogPanel()
        yield Footer()

    def on_mount(self) -> None:
        log_panel = self.query_one(LogPanel)
        log_panel.log_info("Welcome to slug-studio!")
        log_panel.log_info("Type a title to derive its slug, then press Ctrl+S to accept it.")
        self._refresh_preview()

    def get_system_commands(self, screen: Screen) -> Iterable[SystemCommand]:
        yield from super().get_system_commands(screen)
        yield SystemCommand("Settings", "Open settings", self.action_open_settings)
        yield SystemCommand("Clear log", "Clear all log messages", self.action_clear_log)
        yield SystemCommand("Reset form", "Clear the title and slug", self.action_reset)

    def _build_validator(self) -> SlugValidator:
        return SlugValidator(existing=self.accepted, max_length=self._config.max_length)

    def _refresh_preview(self) -> None:
        self.query_one(PreviewPanel).update_preview(
            self._current_slug,
            self._current_status is SlugStatus.VALID,
            self._config,
        )

    def action_open_settings(self) -> None:
        self.push_screen(SettingsScreen(self._config), self._on_settings_closed)

    def action_quit(self) -> None:
        self._save_config()
        self.exit()

    def action_generate(self) -> None:
        form = self.query_one(SlugForm)
        slug = form.generate()
        log_panel = self.query_one(LogPanel)
        if slug:
            log_panel.log_info(f"Generated '{slug}' from title")
        else:
            log_panel.log_warning("Title has no characters usable in a slug")

    def action_normalize(self) -> None:
        form = self.query_one(SlugForm)
        before = form.slug_value
        after = form.normalize()
        log_panel = self.query_one(LogPanel)
        if before == after:
            log_panel.log_info("Slug is already normalized")
        elif after:
            log_panel.log_info(f"Normalized '{before}' to '{after}'")
        else:
            log_panel.log_warning(f"Nothing usable left after normalizing '{before}'")

    def action_accept(self) -> None:
        self.query_one(SlugForm).accept()

    def action_clear_log(self) -> None:
        self.query_one(LogPanel).clear()

    def action_reset(self) -> None:
        self.query_one(SlugForm).reset()

    def _save_config(self) -> None:
        try:
            self._config_manager.save(self._config)
        except OSError:
            pass

    def on_slug_form_slug_changed(self, event: SlugForm.SlugChanged) -> None:
        self._current_slug = event.slug
        self._current_status = event.status
        self._refresh_preview()

    def on_slug_form_slug_accepted(self, event: SlugForm.SlugAccepted) -> None:
        self.accepted[event.slug] = event.title
        path = document_path(
            event.slug,
            document_type=self._config.document_type,
            language=self._config.language,
        )
        self.query_one(LogPanel).log_success(f"Accepted '{event.slug}' ({path})")
        self.notify(f"Slug accepted: {event.slug}", severity="information")
        self.query_one(SlugForm).set_validator(self._build_validator())

    def on_slug_form_slug_rejected(self, event: SlugForm.SlugRejected) -> None:
        self.query_one(LogPanel).log_error(event.reason)

    def on_settings_screen_config_changed(self, event: SettingsScreen.ConfigChanged) -> None:
        self._config = event.config
        self._save_config()

    def _on_settings_closed(self, result: None) -> None:
        form = self.query_one(SlugForm)
        if form.auto_generate != self._config.auto_generate:
            form.set_auto_generate(self._config.auto_generate)
        form.set_validator(self._build_validator())
        self._refresh_preview()
        self.query_one(LogPanel).log_info("Settings updated")
