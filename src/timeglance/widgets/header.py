from textual.widgets import Header as TextualHeader

APP_NAME = "timeglance"


def page_title(page_name: str = "") -> str:
    return f"{APP_NAME} - {page_name}" if page_name else APP_NAME


class Header(TextualHeader):
    """Application header styled to match the footer.

    Textual renders the owning screen's title here; screens set it from
    ``page_title()`` on mount.
    """

    DEFAULT_CSS = """
    Header {
        dock: top;
        background: $panel-darken-2;
        border-bottom: heavy $primary;
        padding: 0 1;
        text-style: bold;
        content-align: center middle;
        height: 2;
        min-height: 1;
    }
    """
