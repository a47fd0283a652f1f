"""Preview panel showing where a slug will be published."""

from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Label, Static

from slug_studio.models import Config
from slug_studio.utils.urls import absolute_url, document_path, exit_preview_url, preview_url


class PreviewPanel(Container):
    """Frontend path and draft-mode links for the current slug."""

    current_path: str = "/"

    def compose(self) -> ComposeResult:
        """Compose the preview panel layout."""
        yield Static("🌐 Preview", classes="panel-header")
        yield Label("Path", classes="field-label")
        yield Static("/", id="preview-path", classes="preview-value")
        yield Label("URL", classes="field-label")
        yield Static("", id="preview-url", classes="preview-value")
        yield Label("Draft mode", classes="field-label")
        yield Static("", id="preview-link", classes="preview-value")
        yield Static("", id="exit-preview-link", classes="preview-value muted")

    def update_preview(self, slug: str, valid: bool, config: Config) -> str:
        """Show the links for a slug.

        Invalid slugs are not linked; the listing path is shown instead.

        Args:
            slug: The current slug.
            valid: Whether the slug passed validation.
            config: Configuration providing site URL, language and type.

        Returns:
            The path that was displayed.
        """
        path = document_path(
            slug if valid else "",
            document_type=config.document_type,
            language=config.language,
        )
        self.query_one("#preview-path", Static).update(path)
        self.query_one("#preview-url", Static).update(absolute_url(config.site_url, path))

        if valid:
            self.query_one("#preview-link", Static).update(preview_url(config.site_url, path))
        else:
            self.query_one("#preview-link", Static).update("Preview unavailable until the slug is valid")
        self.query_one("#exit-preview-link", Static).update(
            f"Exit: {exit_preview_url(config.site_url)}"
        )
        self.current_path = path
        return path
