from utils.ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    get_page_specific_class
)


def test_pages_blueprint_assets():
    assert get_blueprint_styles('pages') == ['css/pages/public.css']
    assert get_blueprint_scripts('pages') == ['js/contact.js']


def test_unknown_blueprint_has_no_assets():
    assert get_blueprint_styles('api') == []
    assert get_blueprint_scripts(None) == []


def test_page_specific_class():
    assert get_page_specific_class('pages', 'index') == 'page-pages page-pages-index'
    assert get_page_specific_class(None) == 'page-default'
