import pytest

from pwcheck.analyzers.patterns import (
    COMMON_PASSWORDS,
    SUBSTITUTIONS,
    CommonPatternMatcher,
    normalize,
)


@pytest.fixture
def matcher():
    return CommonPatternMatcher()


@pytest.mark.parametrize("password", sorted(COMMON_PASSWORDS))
def test_every_listed_password_matches(matcher, password):
    assert matcher.is_common(password)
    assert matcher.matches(password)


@pytest.mark.parametrize("password", ["p4ssw0rd", "PASSWORD", "P4SSW0RD", "l3tm3in", "w3lc0m3", "4dmin"])
def test_disguised_passwords_match(matcher, password):
    assert matcher.matches(password)


def test_exact_membership_is_case_sensitive(matcher):
    assert not matcher.is_common("Password")
    assert matcher.matches("Password")


def test_unrelated_password_does_not_match(matcher):
    assert not matcher.matches("Tr0ub4dor&3")
    assert not matcher.matches("correct horse battery staple")


def test_normalize_undoes_substitutions():
    assert normalize("P4ssw0rd") == "password"
    assert normalize("1337") == "ieet"


def test_substitutions_follow_the_fixed_table(matcher):
    assert matcher.matches("qw3r7y")
    # "1" reverses to "i", never "l"
    assert not matcher.matches("w31c0m3")
    assert matcher.matches("l3tm31n")


def test_extra_passwords_are_per_instance():
    matcher = CommonPatternMatcher(["Hunter2"])
    assert matcher.matches("hunter2")
    assert "hunter2" in matcher.passwords
    assert "hunter2" not in COMMON_PASSWORDS
    assert not CommonPatternMatcher().matches("hunter2")


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        SUBSTITUTIONS["8"] = "b"
    with pytest.raises(AttributeError):
        COMMON_PASSWORDS.add("hunter2")


def test_context_free_reversal_flags_strings_that_only_spell_a_listed_password(matcher):
    # codes that happen to spell a listed word are flagged too
    assert normalize("4DM1N") == "admin"
    assert matcher.matches("4DM1N")
    assert normalize("L37M31N") == "letmein"
    assert matcher.matches("L37M31N")
