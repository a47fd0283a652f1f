"""Slug form component for title and slug entry."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.message import Message
from textual.widgets import Button, Input, Label, Static

from slug_studio.models import SlugStatus
from slug_studio.utils.slugs import generate_slug, normalize_slug
from slug_studio.utils.validator import SlugValidator


class SlugForm(Container):
    """Form for title entry and slug editing."""

    class SlugChanged(Message):
        """Message sent when the slug value changes."""

        def __init__(self, slug: str, status: SlugStatus) -> None:
            self.slug = slug
            self.status = status
            super().__init__()

    class SlugAccepted(Message):
        """Message sent when a valid slug is accepted."""

        def __init__(self, title: str, slug: str) -> None:
            self.title = title
            self.slug = slug
            super().__init__()

    class SlugRejected(Message):
        """Message sent when accepting an invalid slug."""

        def __init__(self, slug: str, reason: str) -> None:
            self.slug = slug
            self.reason = reason
            super().__init__()

    def __init__(
        self,
        initial_title: str | None = None,
        auto_generate: bool = True,
        validator: SlugValidator | None = None,
    ) -> None:
        """Initialize the slug form.

        Args:
            initial_title: Optional title to pre-fill.
            auto_generate: Whether the slug follows the title.
            validator: Validator used for the live status line.
        """
        super().__init__()
        self._initial_title = initial_title
        self._auto_generate = auto_generate
        self._following = auto_generate
        self._validator = validator or SlugValidator()
        # Values written to the slug input by the form itself
        self._programmatic: set[str] = set()

    def compose(self) -> ComposeResult:
        """Compose the slug form layout."""
        yield Static("🔗 Slug", classes="form-title")
        yield Label("Title", classes="field-label")
        yield Input(
            placeholder="Document title...",
            id="title-input",
            value=self._initial_title or "",
        )
        yield Label("Slug", classes="field-label")
        with Horizontal(id="slug-row"):
            yield Input(placeholder="url-segment", id="slug-input")
            yield Button("Generate", id="generate-btn", variant="default")
            yield Button("Normalize", id="normalize-btn", variant="default")
            yield Button("Accept", id="accept-btn", variant="primary", disabled=True)
        yield Static("", id="slug-validation", classes="validation-message")

    def on_mount(self) -> None:
        """Focus title input and derive the initial slug."""
        self.query_one("#title-input", Input).focus()
        if self._initial_title and self._following:
            self._set_slug(generate_slug(self._initial_title))

    @property
    def title_value(self) -> str:
        return self.query_one("#title-input", Input).value

    @property
    def slug_value(self) -> str:
        return self.query_one("#slug-input", Input).value

    @property
    def auto_generate(self) -> bool:
        return self._auto_generate

    @property
    def following_title(self) -> bool:
        """True while the slug is regenerated on every title change."""
        return self._following

    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes."""
        if event.input.id == "title-input":
            if self._following:
                self._set_slug(generate_slug(event.value))
        elif event.input.id == "slug-input":
            if event.value in self._programmatic:
                self._programmatic.discard(event.value)
            else:
                # Hand-edited slugs stop following the title
                self._following = False
            self._validate_slug(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in inputs."""
        if event.input.id == "title-input":
            self.query_one("#slug-input", Input).focus()
        elif event.input.id == "slug-input":
            self.accept()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press."""
        if event.button.id == "generate-btn":
            self.generate()
        elif event.button.id == "normalize-btn":
            self.normalize()
        elif event.button.id == "accept-btn":
            self.accept()

    def _set_slug(self, slug: str) -> None:
        """Write a slug without counting it as a hand edit."""
        slug_input = self.query_one("#slug-input", Input)
        if slug_input.value != slug:
            self._programmatic.add(slug)
            slug_input.value = slug
        self._validate_slug(slug)

    def _validate_slug(self, slug: str) -> None:
        """Validate slug and update UI."""
        validation_label = self.query_one("#slug-validation", Static)
        accept_btn = self.query_one("#accept-btn", Button)

        validation_label.remove_class("validation-error", "validation-success")

        if not slug:
            validation_label.update("")
            accept_btn.disabled = True
            self.post_message(self.SlugChanged(slug, SlugStatus.EMPTY))
            return

        result = self._validator.validate(slug)

        if result.success:
            validation_label.update(f"✓ {result.message}")
            validation_label.add_class("validation-success")
            accept_btn.disabled = False
            status = SlugStatus.VALID
        else:
            validation_label.update(f"✗ {result.message}")
            validation_label.add_class("validation-error")
            accept_btn.disabled = True
            status = SlugStatus.INVALID

        self.post_message(self.SlugChanged(slug, status))

    def generate(self) -> str:
        """Derive the slug from the title and resume following it.

        Returns:
            The generated slug.
        """
        slug = generate_slug(self.title_value)
        self._following = self._auto_generate
        self._set_slug(slug)
        return slug

    def normalize(self) -> str:
        """Repair the current slug in place.

        Returns:
            The normalized slug.
        """
        slug = normalize_slug(self.slug_value)
        self._set_slug(slug)
        return slug

    def accept(self) -> bool:
        """Accept the current slug if it validates.

        Returns:
            True if a SlugAccepted message was sent.
        """
        slug = self.slug_value
        result = self._validator.validate(slug)
        if not result.success:
            self.post_message(self.SlugRejected(slug, result.message))
            return False

        self.post_message(self.SlugAccepted(self.title_value, slug))
        return True

    def set_validator(self, validator: SlugValidator) -> None:
        """Swap the validator and re-check the current slug."""
        self._validator = validator
        self._validate_slug(self.slug_value)

    def set_auto_generate(self, enabled: bool) -> None:
        """Turn following the title on or off."""
        self._auto_generate = enabled
        self._following = enabled
        if enabled:
            self._set_slug(generate_slug(self.title_value))

    def reset(self) -> None:
        """Reset the form to initial state."""
        self._following = self._auto_generate
        self.query_one("#title-input", Input).value = ""
        self._set_slug("")
        self.query_one("#title-input", Input).focus()
