import pytest

from l10n_merge.translation import Translation, TranslationMismatchError


def test_comment_is_truncated_at_first_semicolon():
    t = Translation("login", "", "Shown on login; Suggestions: foo")
    assert t.comment == "Shown on login"


def test_comment_with_suggestions():
    t = Translation("A", "", "x")
    assert t.comment_with_suggestions == "x"
    assert t.with_suggestions("y").comment_with_suggestions == "x; Suggestions: y"


def test_prior_translation_only_takes_value():
    new = Translation("A", "", "greeting v2", "Hi")
    old = Translation("A", "Hola", "greeting")
    updated = new.with_prior_translation(old)
    assert updated == Translation("A", "Hola", "greeting v2", "Hi")
    assert new.value == ""


def test_prior_translation_with_other_key_fails():
    with pytest.raises(TranslationMismatchError):
        Translation("A", "").with_prior_translation(Translation("B", "b"))


def test_key_is_immutable():
    t = Translation("A", "a")
    with pytest.raises(AttributeError):
        t.key = "B"
