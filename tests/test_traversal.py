from foliage import Document
from foliage import traversal


def test_descendants_are_preorder(mixed_doc):
    assert list(traversal.descendants(mixed_doc, 0)) == list(range(1, len(mixed_doc)))
    # div#outer holds ids 4..13
    assert list(traversal.descendants(mixed_doc, 3)) == list(range(4, 14))


def test_descendants_of_leaf_is_empty(mixed_doc):
    assert list(traversal.descendants(mixed_doc, 4)) == []


def test_ancestors_stop_below_root(mixed_doc):
    assert list(traversal.ancestors(mixed_doc, 9)) == [8, 6, 3, 2, 1]
    assert list(traversal.ancestors(mixed_doc, 1)) == []
    assert list(traversal.ancestors(mixed_doc, 0)) == []


def test_parent_index(mixed_doc):
    assert traversal.parent_index(mixed_doc, 0) is None
    assert traversal.parent_index(mixed_doc, 1) is None
    assert traversal.parent_index(mixed_doc, 2) == 1


def test_sibling_walks(mixed_doc):
    assert list(traversal.following_siblings(mixed_doc, 4)) == [5, 6, 11]
    assert list(traversal.preceding_siblings(mixed_doc, 11)) == [6, 5, 4]
    assert traversal.sibling_index(mixed_doc, 0, 1) is None


def test_top_level_nodes_are_siblings():
    doc = Document.from_html('<a>1</a><b>2</b>')
    assert traversal.sibling_index(doc, 1, 1) == 3
    assert traversal.sibling_index(doc, 3, -1) == 1


def test_collect_text(mixed_doc):
    assert traversal.collect_text(mixed_doc, 6) == 'Hello big world'
    assert traversal.collect_text(mixed_doc, 9) == 'big'
    assert traversal.collect_text(mixed_doc, 5) == ''


def test_depth(mixed_doc):
    assert traversal.depth(mixed_doc, 1) == 0
    assert traversal.depth(mixed_doc, 9) == 5
