"""
API Blueprint - JSON endpoints used by the landing page scripts
Handles: Contact form relay
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
