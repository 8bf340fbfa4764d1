"""Unit tests for the line codec."""

from pyflatstore.codec import (
    TokenKind,
    read_text,
    render_list,
    render_sections,
    split_list,
    tokenize
)


class TestTokenize:
    def test_comments_and_blank_lines_skipped(self):
        tokens = list(tokenize(['# hi', '', '   ', '  # indented', '[user]']))
        assert [t.kind for t in tokens] == [TokenKind.SECTION]
        assert tokens[0].lineno == 5

    def test_field_split_on_first_colon(self):
        tokens = list(tokenize(['[user]', ' url :  http://x.org:80/ ']))
        assert tokens[1].kind is TokenKind.FIELD
        assert tokens[1].key == 'url'
        assert tokens[1].value == 'http://x.org:80/'

    def test_unsplittable_line_dropped(self):
        tokens = list(tokenize(['[user]', 'no delimiter here']))
        assert tokens[1].kind is TokenKind.DROPPED

    def test_orphan_field_dropped(self):
        tokens = list(tokenize(['key: v', '[user]', 'name: Alice']))
        assert [t.kind for t in tokens] == [
            TokenKind.DROPPED, TokenKind.SECTION, TokenKind.FIELD]

    def test_any_bracketed_tag_opens_section(self):
        tokens = list(tokenize(['  [whatever: x]  ']))
        assert tokens[0].kind is TokenKind.SECTION
        assert tokens[0].key == 'whatever: x'


class TestReadSections:
    def test_groups_pairs_by_section(self):
        doc = read_text('[user]\na: 1\nb: 2\n\n[user]\na: 3\n')
        assert len(doc.sections) == 2
        assert [(p.key, p.value) for p in doc.sections[0].pairs] == [
            ('a', '1'), ('b', '2')]
        assert doc.sections[1].pairs[0].lineno == 6

    def test_field_before_first_section_is_ignored(self):
        doc = read_text('key: v\n[user]\nname: Alice')
        assert len(doc.sections) == 1
        assert [p.key for p in doc.sections[0].pairs] == ['name']
        assert doc.dropped == [(1, 'key: v')]

    def test_empty_section_kept(self):
        doc = read_text('[user]\n[user]\nname: Bob\n')
        assert [len(s) for s in doc.sections] == [0, 1]

    def test_empty_input(self):
        doc = read_text('')
        assert doc.sections == [] and doc.dropped == []


class TestLists:
    def test_split_list(self):
        assert split_list('[1, 2,3 ]') == ['1', '2', '3']

    def test_split_empty_list(self):
        assert split_list('[]') == []
        assert split_list('[  ]') == []

    def test_split_unbracketed(self):
        assert split_list('1, 2, 3') is None

    def test_render_list(self):
        assert render_list(['1', '2', '3']) == '[1, 2, 3]'
        assert render_list([]) == '[]'


class TestRender:
    def test_render_sections(self):
        text = render_sections([[('Name', 'Alice'), ('age', '3')], []])
        assert text == '[user]\nname: Alice\nage: 3\n\n[user]\n\n'

    def test_render_custom_tag(self):
        assert render_sections([[('a', 'b')]], 'item') == '[item]\na: b\n\n'
