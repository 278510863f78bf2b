from rich.text import Text

from ferrolings import ui


def test_no_emoji_reflects_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_no_emoji_set_to_empty_value_counts(monkeypatch):
    monkeypatch.setenv("NO_EMOJI", "")
    assert ui.no_emoji() is True


def test_bold_keeps_text_and_styles_it():
    styled = ui.bold("`I AM NOT DONE`")
    assert isinstance(styled, Text)
    assert styled.plain == "`I AM NOT DONE`"
    assert "bold" in str(styled.style)


def test_bold_converts_non_strings():
    assert ui.bold(12).plain == "12"


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran exercise with errors")
    assert capsys.readouterr().out == "! Ran exercise with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran exercise")
    assert capsys.readouterr().out == "✓ Successfully ran exercise\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.warn("careful")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith(" careful\n")


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    ui.success("done")
    assert capsys.readouterr().out == "✅ done\n"


def test_brackets_are_not_markup(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("[bold]x[/bold]")
    assert capsys.readouterr().out == "! [bold]x[/bold]\n"