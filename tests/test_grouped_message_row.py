"""
Tests for GroupedChatMessageRow.

Covers binding, rebinding after reuse, stale-ticket handling and the
minimum row height.
"""

import pytest

from talkrow.core import MINIMUM_ROW_HEIGHT, DEFAULT_FONT_SIZE, RowLayoutConfig, install_layout_config
from talkrow.gui.widgets import GroupedChatMessageRow, ListRow, BindingTicket


@pytest.fixture
def row(qapp):
    r = GroupedChatMessageRow()
    yield r
    r.deleteLater()


class TestBinding:
    """bind() and current_position()."""

    def test_new_row_is_unbound(self, row):
        assert row.is_bound is False
        assert row.current_position() is None
        assert row.body_text == ''

    @pytest.mark.parametrize('text, position', [
        ("hello", 3),
        ("", 0),
        ("multi\nline", (2, 14)),
        ("x" * 5000, 'msg-42'),
    ])
    def test_bind_sets_text_and_position(self, row, text, position):
        row.bind(text, position)

        assert row.is_bound is True
        assert row.current_position() == position
        assert row.body_text == text
        assert row.body_label.text() == text

    def test_bind_none_shows_empty_text(self, row):
        row.bind(None, 1)

        assert row.is_bound is True
        assert row.body_label.text() == ''

    def test_rebind_leaves_no_residue(self, row):
        row.bind("first message", 1)
        row.bind("second", 2)

        assert row.current_position() == 2
        assert row.body_text == "second"
        assert row.body_label.text() == "second"

    def test_rebind_same_position_is_valid(self, row):
        row.bind("a", 5)
        row.bind("b", 5)

        assert row.is_bound is True
        assert row.current_position() == 5
        assert row.body_text == "b"

    def test_bind_emits_rebound(self, row):
        seen = []
        row.rebound.connect(seen.append)

        row.bind("a", 1)
        row.bind("b", (0, 2))

        assert seen == [1, (0, 2)]

    def test_body_label_is_plain_text(self, row):
        row.bind("<b>not bold</b>", 1)

        assert row.body_label.text() == "<b>not bold</b>"


class TestTickets:
    """Stale async results after reuse."""

    def test_ticket_matches_current_binding(self, row):
        row.bind("hello", 3)
        ticket = row.ticket()

        assert ticket.position == 3
        assert row.is_current(ticket)

    def test_unbound_row_ticket_is_never_current(self, row):
        assert not row.is_current(row.ticket())

    def test_fetch_for_old_position_is_discarded(self, row):
        row.bind("hello", 3)
        ticket = row.ticket()

        # Row scrolls away and is reused before the fetch completes
        row.bind("world", 7)

        assert row.current_position() != ticket.position
        assert row.apply_if_current(ticket, "late preview") is False
        assert row.body_text == "world"
        assert row.current_position() == 7

    def test_fetch_for_earlier_binding_of_same_position_is_discarded(self, row):
        row.bind("hello", 3)
        ticket = row.ticket()
        row.bind("hello again", 3)

        assert row.apply_if_current(ticket, "late") is False
        assert row.body_text == "hello again"

    def test_current_ticket_applies_content(self, row):
        row.bind("…", 4)
        ticket = row.ticket()

        assert row.apply_if_current(ticket, "full body") is True
        assert row.body_label.text() == "full body"
        assert row.current_position() == 4
        # Applying content does not start a new binding
        assert row.is_current(ticket)

    def test_ticket_is_immutable(self, row):
        row.bind("a", 1)
        ticket = row.ticket()

        with pytest.raises(AttributeError):
            ticket.position = 2

    def test_ticket_equality(self):
        assert BindingTicket(3, 1) == BindingTicket(3, 1)
        assert BindingTicket(3, 1) != BindingTicket(3, 2)


class TestReuse:

    def test_prepare_for_reuse_clears_but_stays_bound(self, row):
        row.bind("hello", 3)
        ticket = row.ticket()

        row.prepare_for_reuse()

        assert row.is_bound is True
        assert row.current_position() is None
        assert row.body_label.text() == ''
        assert not row.is_current(ticket)

    def test_rebind_after_reuse(self, row):
        row.bind("hello", 3)
        stale = row.ticket()
        row.prepare_for_reuse()
        row.bind("world", 7)

        assert row.is_bound is True
        assert row.current_position() == 7
        assert row.apply_if_current(stale, "late") is False
        assert row.body_text == "world"

    def test_row_satisfies_list_row(self, row):
        assert isinstance(row, ListRow)
        assert row.widget() is row
        assert row.REUSE_IDENTIFIER == 'GroupedChatMessageCellIdentifier'


class TestSizing:

    def test_default_font_size_is_stable(self, qapp):
        first = GroupedChatMessageRow.default_font_size()

        assert first == DEFAULT_FONT_SIZE
        assert all(GroupedChatMessageRow.default_font_size() == first for _ in range(10))

    def test_default_font_size_follows_installed_config(self, qapp):
        install_layout_config(RowLayoutConfig(default_font_size=20.0))

        assert GroupedChatMessageRow.default_font_size() == 20.0

        r = GroupedChatMessageRow()
        assert r.body_label.font().pointSizeF() == 20.0
        r.deleteLater()

    def test_label_uses_default_font_size(self, row):
        assert row.body_label.font().pointSizeF() == DEFAULT_FONT_SIZE

    @pytest.mark.parametrize('text', ["", "a", "word " * 400])
    def test_height_never_below_minimum(self, row, text):
        row.bind(text, 0)
        row.resize(300, 1)

        assert row.sizeHint().height() >= MINIMUM_ROW_HEIGHT
        assert row.minimumSizeHint().height() >= MINIMUM_ROW_HEIGHT
        assert row.minimumHeight() >= MINIMUM_ROW_HEIGHT

    def test_minimum_row_height_constant(self):
        assert MINIMUM_ROW_HEIGHT == 30.0
        assert GroupedChatMessageRow.minimum_row_height() == 30.0

    def test_minimum_row_height_ignores_layout_config(self, qapp):
        install_layout_config(RowLayoutConfig(default_font_size=40.0, vertical_padding=0))

        assert GroupedChatMessageRow.minimum_row_height() == 30.0
        r = GroupedChatMessageRow()
        assert r.minimumHeight() == 30
        r.deleteLater()


class TestTheme:

    def test_theme_changes_text_color(self, row):
        from PySide6.QtGui import QPalette
        from talkrow.styles import get_row_colors

        row.set_theme('dark')

        assert row.palette().color(QPalette.WindowText) == get_row_colors('dark')['text']
        assert row.palette().color(QPalette.Window) == get_row_colors('dark')['background']
