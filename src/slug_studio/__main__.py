"""Entry point for slug-studio application."""

import sys


def main() -> None:
    """Main entry point for the slug-studio application."""
    # Import here to speed up --help
    from slug_studio.app import SlugStudioApp

    # Optional title argument pre-fills the form
    title = " ".join(sys.argv[1:]) or None
    app = SlugStudioApp(initial_title=title)
    app.run()


if __name__ == "__main__":
    main()
