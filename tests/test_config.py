import pytest

from pwcore.config import PwConfig


def test_defaults():
    config = PwConfig()
    assert config.evaluator.guesses_per_second == 1e9
    assert config.evaluator.breach_check is True
    assert config.evaluator.breach_timeout == 5.0
    assert config.evaluator.breach_padding is True
    assert config.evaluator.extra_common_passwords == []
    assert config.global_settings.log_level == "WARNING"


def test_load_from_toml(tmp_path):
    path = tmp_path / "pwcheck.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "log_json = true\n"
        "\n"
        "[evaluator]\n"
        "guesses_per_second = 1e6\n"
        "breach_check = false\n"
        'extra_common_passwords = ["hunter2"]\n'
        'unknown_key = "ignored"\n',
        encoding="utf-8",
    )

    config = PwConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.evaluator.guesses_per_second == 1e6
    assert config.evaluator.breach_check is False
    assert config.evaluator.extra_common_passwords == ["hunter2"]
    assert config.evaluator.breach_timeout == 5.0


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PwConfig.load(tmp_path / "nope.toml")
