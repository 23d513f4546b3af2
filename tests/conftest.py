import pytest

from foliage import Document, TreeBuilder


@pytest.fixture
def simple_doc():
    return Document.from_html('<div class="a b"><span id="x">hi</span></div>')


@pytest.fixture
def menu_doc():
    return Document.from_html(
        '<ul id="m"><li><a href="/x">X</a></li></ul>'
        '<ul id="n"><li><a href="/z">Z</a></li></ul>'
        '<p><a href="/y">Y</a></p>'
    )


@pytest.fixture
def questions_doc():
    return Document.from_html(
        '<div class="q"><span>one</span></div>'
        '<div class="q"><span>two</span></div>'
        '<div class="q"><span>three</span></div>'
    )


@pytest.fixture
def mixed_doc():
    """Elements, text and a comment at several depths"""
    return Document.from_html(
        '<html><body>'
        '<div id="outer" class="box">'
        'lead <!-- note --><p class="intro">Hello <b>big</b> world</p>'
        '<div id="inner" class="box"><p>Inner</p></div>'
        '</div>'
        '<p class="ab bc">tail</p>'
        '</body></html>'
    )


@pytest.fixture
def built_doc():
    """Same shape as simple_doc, assembled without a parser"""
    builder = TreeBuilder()
    builder.start_element('div', {'class': 'a b'})
    builder.start_element('span', {'id': 'x'})
    builder.text('hi')
    builder.end_element()
    builder.end_element()
    return Document(builder.build())
