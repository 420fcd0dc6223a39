"""QSS for the application, generated from the centralized palettes.

One stylesheet covers both themes; every rule is scoped under the root
window's ``theme`` property so switching the property is enough to restyle.
"""

from shadeshift.core.constants import ROOT_THEME_PROPERTY
from shadeshift.core.models import Theme
from shadeshift.ui.theme_registry import ThemePalette, get_palette


def _generate_qss(p: ThemePalette) -> str:
    """Generate the rules for one palette, scoped to its root property value."""
    root = f'QMainWindow[{ROOT_THEME_PROPERTY}="{p.name}"]'
    return f"""
{root} {{
    background-color: {p.bg};
    color: {p.text};
}}
{root} QWidget {{
    color: {p.text};
}}
{root} QScrollArea, {root} QWidget#contentArea {{
    background-color: {p.bg};
    border: none;
}}
{root} QToolBar#navbar {{
    background-color: {p.bg};
    border-bottom: 1px solid {p.admin_border};
    spacing: 8px;
    padding: 4px 12px;
}}
{root} QLabel#siteTitle {{
    color: {p.text};
    font-size: 18px;
    font-weight: bold;
}}
{root} QToolButton#navLink {{
    color: {p.text_gray};
    border: 1px solid transparent;
    border-radius: 4px;
    padding: 4px 10px;
}}
{root} QToolButton#navLink:hover {{
    color: {p.text_hover};
}}
{root} QToolButton#navLink:checked {{
    color: {p.active_text};
    background-color: {p.active_bg};
    border-color: {p.active_border};
}}
{root} QToolButton#themeToggle {{
    color: {p.text};
    background-color: transparent;
    border: none;
    border-radius: 25px;
}}
{root} QToolButton#themeToggle:hover {{
    color: {p.text_hover};
}}
{root} QFrame#card {{
    background-color: {p.admin_card};
    border: 1px solid {p.admin_border};
    border-radius: 8px;
}}
{root} QLabel#cardTitle {{
    color: {p.admin_text};
    font-size: 15px;
    font-weight: bold;
}}
{root} QLabel#cardBody {{
    color: {p.admin_muted};
}}
{root} QStatusBar {{
    background-color: {p.admin_bg};
    color: {p.text_gray};
    border-top: 1px solid {p.admin_border};
    font-size: 12px;
}}
"""


def get_stylesheet() -> str:
    """Stylesheet covering every theme; install once on the root window."""
    return "".join(_generate_qss(get_palette(theme)) for theme in Theme)
