"""
UI Helper Functions for Blueprint-Specific Assets
=================================================

Each blueprint can ship its own CSS/JS. The active blueprint's assets are
injected into every template by the context processor in app.py.

To add assets for a blueprint:
1. Put the file under static/css or static/js
2. Add its path to the maps below
"""

from flask import request
from typing import List, Dict, Optional


BLUEPRINT_CSS_MAP = {
    'pages': [
        'css/pages/public.css',
    ],
}

BLUEPRINT_JS_MAP = {
    'pages': [
        'js/contact.js',
    ],
}


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('pages')
        ['css/pages/public.css']
    """
    if not blueprint_name:
        return []
    return list(BLUEPRINT_CSS_MAP.get(blueprint_name, []))


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """JavaScript files for a blueprint"""
    if not blueprint_name:
        return []
    return list(BLUEPRINT_JS_MAP.get(blueprint_name, []))


def inject_blueprint_assets() -> Dict[str, object]:
    """
    Assets for the blueprint handling the current request

    Returns:
        dict: blueprint_styles, blueprint_scripts, current_blueprint

    Template usage:
        {% for style_file in blueprint_styles %}
        <link rel="stylesheet" href="{{ url_for('static', filename=style_file) }}">
        {% endfor %}
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the <body> of a page

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)
