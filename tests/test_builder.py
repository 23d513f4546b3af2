import logging

import pytest
from bs4 import BeautifulSoup

from foliage import (
    Comment,
    Document,
    DocumentBuildError,
    Name,
    NodeKind,
    ParseConfig,
    Text,
    TreeBuilder,
)
from foliage.document import records_from_soup


def test_tree_builder_links_parents_children_and_positions():
    builder = TreeBuilder()
    ul = builder.start_element('ul')
    first = builder.start_element('li')
    builder.end_element()
    second = builder.start_element('li')
    builder.end_element()
    builder.end_element()
    records = builder.build()

    assert records[ul].parent == 0
    assert records[ul].children == (first, second)
    assert records[first].position == 0
    assert records[second].position == 1
    assert records[second].parent == ul


def test_tree_builder_closes_open_elements_on_build():
    builder = TreeBuilder()
    builder.start_element('div')
    builder.start_element('p')
    builder.text('open')
    doc = Document(builder.build(), ParseConfig(validate=True))
    assert doc.find(Name('p')).text() == 'open'


def test_tree_builder_rejects_unbalanced_end(caplog):
    builder = TreeBuilder()
    with caplog.at_level(logging.WARNING, logger='foliage'):
        with pytest.raises(DocumentBuildError):
            builder.end_element()
    assert 'no open element' in caplog.text


def test_built_and_parsed_documents_agree(simple_doc, built_doc):
    for doc in (simple_doc, built_doc):
        span = doc.find(Name('span')).first()
        assert span.text() == 'hi'
        assert span.parent().attr('class') == 'a b'


def test_multi_valued_attributes_are_joined():
    doc = Document.from_html('<p class="one   two" rel="nofollow noopener">x</p>')
    p = doc.find(Name('p')).first()
    assert p.attr('class') == 'one two'
    assert p.attr('rel') == 'nofollow noopener'


def test_attribute_order_follows_markup():
    doc = Document.from_html('<a zeta="1" alpha="2" mid="3"></a>')
    assert list(doc.find(Name('a')).first().attrs()) == ['zeta', 'alpha', 'mid']


def test_doctype_and_processing_instructions_are_skipped():
    doc = Document.from_html('<!DOCTYPE html><?xml-stylesheet href="a"?><p>x</p>')
    kinds = [node.kind for node in doc]
    assert kinds == [NodeKind.ELEMENT, NodeKind.TEXT]


def test_comments_kept_by_default_and_droppable():
    markup = '<p>a<!-- c -->b</p>'
    assert Document.from_html(markup).find(Comment()).first().as_comment() == ' c '
    dropped = Document.from_html(markup, ParseConfig(keep_comments=False))
    assert dropped.find(Comment()).is_empty()
    assert dropped.find(Text()).texts() == ['a', 'b']


def test_whitespace_text_can_be_skipped():
    markup = '<ul>\n  <li>a</li>\n</ul>'
    assert len(Document.from_html(markup).find(Text())) == 3
    compact = Document.from_html(markup, ParseConfig(skip_whitespace_text=True))
    assert compact.find(Text()).texts() == ['a']


def test_script_content_is_text():
    doc = Document.from_html('<script>var x = 1;</script>')
    assert doc.find(Name('script')).text() == 'var x = 1;'


def test_from_soup_with_a_tag_makes_it_the_top_level_node():
    soup = BeautifulSoup('<body><main><p>inside</p></main><p>outside</p></body>', 'html.parser')
    doc = Document.from_soup(soup.main)
    assert doc.record(1).name == 'main'
    assert doc.record(1).parent == 0
    assert doc.nth(1).parent() is None
    assert doc.find(Name('p')).texts() == ['inside']


def test_records_from_soup_rejects_non_tags(caplog):
    with caplog.at_level(logging.WARNING, logger='foliage'):
        with pytest.raises(DocumentBuildError):
            records_from_soup('<p></p>')
    assert 'got str' in caplog.text


def test_deep_nesting_does_not_recurse():
    depth = 1500
    markup = '<div>' * depth + 'bottom' + '</div>' * depth
    doc = Document.from_html(markup)
    assert len(doc.find(Name('div'))) == depth
    assert doc.text() == 'bottom'
