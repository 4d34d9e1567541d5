import html
import re

# Characters Streamlit's markdown renderer gives meaning to ($ starts LaTeX)
_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def decode_html(text: str) -> str:
    """Turns provider markup such as '&quot;' or '&#039;' into readable text."""
    return html.unescape(text)


def escape_markdown(text: str) -> str:
    """Backslash-escapes decoded text so markdown widgets show it literally."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def escape_html(text: str) -> str:
    """Re-escapes decoded text for use inside an unsafe_allow_html block."""
    return html.escape(text)
