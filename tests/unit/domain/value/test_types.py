"""Unit tests for value helpers."""

import pytest

from peerskill.domain.value import Principal, Role, email_key, normalize_skills, same_email


class TestNormalizeSkills:
    def test_strips_and_drops_blanks(self):
        assert normalize_skills([" Python ", "", "   ", "SQL"]) == ["Python", "SQL"]

    def test_keeps_first_spelling_of_duplicates(self):
        assert normalize_skills(["python", "Python", "PYTHON ", "Go"]) == [
            "python",
            "Go",
        ]

    def test_empty(self):
        assert normalize_skills([]) == []


class TestEmails:
    @pytest.mark.parametrize(
        "a,b",
        [
            ("asha@example.com", "ASHA@example.com"),
            (" Asha@Example.com", "asha@example.com "),
        ],
    )
    def test_same_email(self, a, b):
        assert same_email(a, b)
        assert email_key(a) == email_key(b)

    def test_different_email(self):
        assert not same_email("asha@example.com", "ravi@example.com")


def test_principal_is_admin():
    assert Principal(email="a@example.com", role=Role.ADMIN).is_admin
    assert not Principal(email="a@example.com", role="user").is_admin
