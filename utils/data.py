"""
Data Management Module - Loads the portfolio content shown on the landing page
Content lives in a JSON document so copy edits never touch code.
"""

import json
import os
from flask import current_app


def get_default_portfolio_data():
    """Return default portfolio template"""
    return {
        'name': '',
        'greeting': 'Hola!',
        'title': '',
        'company': '',
        'photo': '',
        'headline': {'lead': 'And I Create', 'highlights': []},
        'availability': [],
        'navigation': [],
        'categories': [],
        'projects': [],
        'skills': [],
        'experience': [],
        'testimonials': [],
        'contact': {
            'email': '',
            'phone': '',
            'location': ''
        },
        'social': {},
        'services': [],
        'settings': {
            'theme': 'light'
        }
    }


def get_data_file_path():
    """Absolute path of the portfolio JSON document"""
    path = current_app.config.get('PORTFOLIO_DATA_FILE', 'data/portfolio.json')
    if not os.path.isabs(path):
        path = os.path.join(current_app.root_path, path)
    return path


def load_data_from_json(path):
    """Read the raw JSON document, {} when it is missing or unreadable"""
    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except FileNotFoundError:
        current_app.logger.warning(f"Portfolio data file not found: {path}")
        return {}
    except (json.JSONDecodeError, OSError) as e:
        current_app.logger.error(f"Error loading portfolio data from {path}: {str(e)}")
        return {}

    if not isinstance(data, dict):
        current_app.logger.error(f"Portfolio data in {path} is not an object, ignoring")
        return {}
    return data


def load_data():
    """
    Load portfolio content for the landing page

    Keys missing from the JSON document are filled from
    get_default_portfolio_data() so templates can rely on them.

    Returns:
        dict: Portfolio content
    """
    data = get_default_portfolio_data()
    data.update(load_data_from_json(get_data_file_path()))
    return data


def get_global_meta(data=None):
    """Get default SEO meta tags"""
    data = data or {}
    name = data.get('name') or 'Portfolio'
    title = data.get('title')
    return {
        'title': f"{name} | {title}" if title else name,
        'description': data.get('description') or f"Projects, skills and experience of {name}.",
        'keywords': ', '.join([name] + [s.get('name', '') for s in data.get('skills', [])])
    }
