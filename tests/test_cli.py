import json

from build_cards import main, parse_args, theme_title
from charades.models import ThemeData, ThemeSummary


def test_list_themes(capsys):
    assert main(["--list"]) is True
    out = capsys.readouterr().out
    assert "animals" in out
    assert "occupations" in out
    assert "(24 words)" in out


def test_json_output(capsys):
    assert main(["--json", "--theme", "animals", "--languages", "en,es", "--count", "3", "--no-shuffle"]) is True
    cards = json.loads(capsys.readouterr().out)
    assert len(cards) == 3
    assert cards[0]["word"] == "Dog"
    assert cards[0]["wordEs"] == "Perro"
    assert [line["language"] for line in cards[0]["lines"]] == ["en", "es"]


def test_json_output_with_difficulty_and_all(capsys):
    assert main(["--json", "--theme", "food", "--all", "--difficulties", "hard"]) is True
    cards = json.loads(capsys.readouterr().out)
    assert len(cards) == 8


def test_seeded_runs_match(capsys):
    main(["--json", "--theme", "actions", "--seed", "7"])
    first = capsys.readouterr().out
    main(["--json", "--theme", "actions", "--seed", "7"])
    assert capsys.readouterr().out == first


def test_writes_html_sheet(tmp_path, capsys):
    output = tmp_path / "sheet.html"
    assert main(["--theme", "holidays", "--languages", "en,zh", "--output", str(output)]) is True
    html = output.read_text(encoding="utf-8")
    assert html.count('class="charade-card"') == 12
    assert 'lang="zh"' in html
    assert "Cards laid out" in capsys.readouterr().out


def test_unknown_theme_fails(capsys):
    assert main(["--theme", "dinosaurs", "--json"]) is False
    assert "not found" in capsys.readouterr().out


def test_missing_themes_dir_fails(tmp_path, capsys):
    assert main(["--list", "--themes-dir", str(tmp_path / "nowhere")]) is False
    assert "Error" in capsys.readouterr().out


def test_csv_themes(tmp_path, capsys):
    (tmp_path / "tools.csv").write_text("text|emoji\nHammer|🔨\nSaw|🪚\n", encoding="utf-8")
    assert main(["--csv", "--themes-dir", str(tmp_path), "--json", "--no-shuffle"]) is True
    cards = json.loads(capsys.readouterr().out)
    assert [c["word"] for c in cards] == ["Hammer", "Saw"]


def test_theme_title():
    assert theme_title(ThemeData(id="food", name="Food & Drinks")) == "Food & Drinks Charades"
    assert theme_title(ThemeData(id="food")) == "food Charades"


def test_shuffle_default_comes_from_settings(isolated_settings, capsys):
    isolated_settings.set("SHUFFLE", False, persist=False)
    assert parse_args([]).shuffle is False
    assert parse_args(["--shuffle"]).shuffle is True

    assert main(["--json", "--theme", "animals", "--count", "3"]) is True
    cards = json.loads(capsys.readouterr().out)
    assert [c["word"] for c in cards] == ["Dog", "Cat", "Fish"]


def test_no_shuffle_flag_overrides_settings(isolated_settings):
    isolated_settings.set("SHUFFLE", True, persist=False)
    assert parse_args([]).shuffle is True
    assert parse_args(["--no-shuffle"]).shuffle is False


def test_remote_source_uses_timeout_setting(isolated_settings, monkeypatch, capsys):
    created = []

    class RecordingSource:
        def __init__(self, base_url, timeout=None):
            created.append((base_url, timeout))

        async def __aenter__(self):
            return self

        async def __aexit__(self, exc_type, exc_val, exc_tb):
            return None

        async def list_themes(self):
            return [ThemeSummary(id="pets", name="Pets", word_count=1, icon="🐾")]

    monkeypatch.setattr("build_cards.RemoteThemeSource", RecordingSource)
    isolated_settings.set("TIMEOUT", 5, persist=False)

    assert main(["--list", "--themes-url", "http://themes.test/data"]) is True
    assert created == [("http://themes.test/data", 5)]
    assert "pets" in capsys.readouterr().out

    assert main(["--list", "--themes-url", "http://themes.test/data", "--timeout", "9"]) is True
    assert created[-1] == ("http://themes.test/data", 9)
