from .allure_utils import attach_html, attach_page_state, attach_png, attach_text

__all__ = [
    "attach_text",
    "attach_html",
    "attach_png",
    "attach_page_state",
]
