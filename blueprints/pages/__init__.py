"""
Pages Blueprint - Public pages
Handles: Landing page, contact form fallback, Privacy, Terms, SEO files
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
