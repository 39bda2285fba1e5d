"""
Pages Routes - Public pages
"""

from datetime import datetime
from flask import render_template, redirect, url_for, request, flash, current_app
from utils.data import load_data, get_global_meta
from utils.relay import relay_submission
from utils.validation import validate_contact
from . import pages_bp


CONTACT_SUCCESS_MESSAGE = "Message sent! I'll get back to you soon."


def render_page(template, **context):
    """Render a public page with the portfolio data and its meta tags"""
    data = load_data()
    return render_template(template, data=data, default_meta=get_global_meta(data), **context)


def render_landing(form=None, errors=None, status=200):
    """Render the landing page, optionally with contact form state"""
    return render_page('landing.html',
                       form=form or {},
                       errors=errors or {}), status


@pages_bp.route('/')
def index():
    """Landing page"""
    return render_landing()


@pages_bp.route('/landing')
def landing():
    """Alias for index"""
    return redirect(url_for('pages.index'))


@pages_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form fallback for browsers without JavaScript"""
    form = {
        'name': request.form.get('name', ''),
        'email': request.form.get('email', ''),
        'message': request.form.get('message', ''),
    }

    # Bots get the same answer as people
    if request.form.get('honeypot'):
        current_app.logger.info('Honeypot triggered on form fallback')
        flash(CONTACT_SUCCESS_MESSAGE, 'success')
        return redirect(url_for('pages.index', _anchor='contact'))

    submission, errors = validate_contact(**form)
    if errors:
        return render_landing(form=form, errors=errors, status=400)

    body, status = relay_submission(submission.to_dict())
    if status == 200:
        flash(CONTACT_SUCCESS_MESSAGE, 'success')
        return redirect(url_for('pages.index', _anchor='contact'))

    error = body.get('error')
    if isinstance(error, dict):
        error = error.get('message') or 'Error sending message. Please try again.'
    flash(str(error), 'danger')
    return render_landing(form=form, status=500)


@pages_bp.route('/privacy')
def privacy():
    """Privacy Policy page"""
    return render_page('pages/privacy.html')


@pages_bp.route('/terms')
def terms():
    """Terms of Service page"""
    return render_page('pages/terms.html')


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Sitemap of the public pages"""
    base_url = request.url_root.rstrip('/')
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [
        {'loc': f'{base_url}/', 'changefreq': 'weekly', 'priority': '1.0'},
        {'loc': f'{base_url}/privacy', 'changefreq': 'yearly', 'priority': '0.3'},
        {'loc': f'{base_url}/terms', 'changefreq': 'yearly', 'priority': '0.3'},
    ]

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """robots.txt for crawlers"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /api/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
