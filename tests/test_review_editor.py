"""
Review editor tests.
"""

from manager_logbook.services.review_editor import ReviewEditor


def test_collapses_whitespace():
    editor = ReviewEditor(blocked_words=[])
    assert editor.auto_edit_review("  Great \n\n stay\t here ") == "Great stay here"


def test_masks_blocked_words_case_insensitively():
    editor = ReviewEditor(blocked_words=["awful", "rude"])
    assert editor.auto_edit_review("Awful room and RUDE staff") == "***** room and **** staff"


def test_masks_whole_words_only():
    editor = ReviewEditor(blocked_words=["bad"])
    assert editor.auto_edit_review("bad badge") == "*** badge"


def test_without_blocked_words_text_is_unchanged():
    editor = ReviewEditor(blocked_words=[])
    assert editor.auto_edit_review("Lovely breakfast") == "Lovely breakfast"
