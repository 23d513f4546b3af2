import io

import pytest

from foliage import (
    Document,
    DocumentBuildError,
    ErrorType,
    MalformedTreeError,
    Name,
    NodeIndexError,
    NodeKind,
    NodeRecord,
    ParseConfig,
)


def test_root_is_synthetic_document_record(simple_doc):
    root = simple_doc.record(0)
    assert root.kind is NodeKind.DOCUMENT
    assert root.parent is None
    assert simple_doc.root().parent() is None


def test_ids_follow_document_order(simple_doc):
    # root, div, span, text
    assert len(simple_doc) == 4
    assert [simple_doc.record(i).index for i in range(4)] == [0, 1, 2, 3]
    assert [node.index for node in simple_doc] == [1, 2, 3]
    assert simple_doc.nth(1).name == 'div'
    assert simple_doc.nth(3).as_text() == 'hi'


def test_store_records_are_immutable(simple_doc):
    record = simple_doc.record(1)
    with pytest.raises(AttributeError):
        record.name = 'p'
    with pytest.raises(TypeError):
        record.attributes['class'] = 'c'
    assert isinstance(record.children, tuple)


def test_nth_out_of_range_raises_index_error(simple_doc):
    with pytest.raises(NodeIndexError) as excinfo:
        simple_doc.nth(99)
    assert isinstance(excinfo.value, IndexError)
    assert excinfo.value.error_type is ErrorType.NODE_INDEX


def test_from_html_accepts_bytes_and_file_objects():
    from_bytes = Document.from_html(b'<p>bytes</p>')
    from_file = Document.from_html(io.StringIO('<p>stream</p>'))
    assert from_bytes.find(Name('p')).text() == 'bytes'
    assert from_file.find(Name('p')).text() == 'stream'


def test_from_html_rejects_other_types():
    with pytest.raises(DocumentBuildError):
        Document.from_html(42)


def test_unknown_parser_is_a_build_error():
    with pytest.raises(DocumentBuildError) as excinfo:
        Document.from_html('<p></p>', ParseConfig(parser='no-such-parser'))
    assert excinfo.value.__cause__ is not None


def test_from_file(tmp_path):
    page = tmp_path / 'page.html'
    page.write_text('<h1>Title</h1>', encoding='utf-8')
    doc = Document.from_file(page)
    assert doc.find(Name('h1')).text() == 'Title'


def test_from_file_detects_declared_charset(tmp_path):
    page = tmp_path / 'latin.html'
    page.write_bytes('<meta charset="windows-1252"><p>café</p>'.encode('windows-1252'))
    assert Document.from_file(page).find(Name('p')).text() == 'café'
    assert Document.from_file(page, encoding='windows-1252').find(Name('p')).text() == 'café'


def test_document_text_concatenates_all_text(mixed_doc):
    assert mixed_doc.text() == 'lead Hello big worldInnertail'


def test_validate_accepts_parsed_documents(mixed_doc):
    mixed_doc.validate()
    Document.from_html('<p>a<b>b</b></p>', ParseConfig(validate=True))


def test_validate_rejects_missing_root():
    records = (NodeRecord(index=0, kind=NodeKind.ELEMENT, name='p'),)
    with pytest.raises(MalformedTreeError):
        Document(records, ParseConfig(validate=True))


def test_validate_rejects_child_claimed_twice():
    records = (
        NodeRecord(index=0, kind=NodeKind.DOCUMENT, children=(1, 2)),
        NodeRecord(index=1, kind=NodeKind.ELEMENT, parent=0, position=0, name='a', children=(2,)),
        NodeRecord(index=2, kind=NodeKind.TEXT, parent=0, position=1, content='x'),
    )
    with pytest.raises(MalformedTreeError):
        Document(records, ParseConfig(validate=True))


def test_validate_rejects_out_of_order_ids():
    records = (
        NodeRecord(index=0, kind=NodeKind.DOCUMENT, children=(2, 1)),
        NodeRecord(index=1, kind=NodeKind.ELEMENT, parent=0, position=1, name='a'),
        NodeRecord(index=2, kind=NodeKind.ELEMENT, parent=0, position=0, name='b'),
    )
    with pytest.raises(MalformedTreeError):
        Document(records, ParseConfig(validate=True))


def test_malformed_store_is_trusted_without_validation():
    records = (NodeRecord(index=0, kind=NodeKind.ELEMENT, name='p'),)
    doc = Document(records)
    assert len(doc) == 1


def test_empty_document():
    doc = Document()
    assert len(doc) == 1
    assert doc.find(Name('p')).is_empty()
    assert doc.text() == ''


def test_stats(mixed_doc):
    stats = mixed_doc.stats()
    assert stats.elements == 8
    assert stats.comments == 1
    assert stats.texts == 6
    assert stats.total_nodes == 15
    assert stats.tag_counts['p'] == 3
    assert stats.max_depth == 5
    assert stats.to_dict()['tag_counts']['div'] == 2
