from ui.widgets.reference_text import ReferenceText, render_html

__all__ = ["ReferenceText", "render_html"]
