from readinglist.models.entry import Entry
from readinglist.services.export_service import RoundupExporter


def test_render_has_front_matter_and_paragraphs(tmp_path):
    exporter = RoundupExporter(tmp_path / "out")
    text = exporter.render(
        "2024-01-07",
        [
            Entry(url="https://a.example", body_text="[A](https://a.example) is good"),
            Entry(url="https://b.example"),
        ],
    )
    assert text == (
        "---\n"
        'title: "Reading Roundup, 2024-01-07"\n'
        "date: 2024-01-07\n"
        "---\n"
        "\n"
        "[A](https://a.example) is good\n"
        "\n"
        "https://b.example\n"
        "\n"
    )


def test_export_writes_file_named_by_date(tmp_path, entries, roundups):
    entry = entries.insert("https://a.example", body_text="Read [A](https://a.example)")
    roundups.add("2024-01-07", entry.id)

    exporter = RoundupExporter(tmp_path / "out")
    path = exporter.export("2024-01-07", roundups.entries_for_date("2024-01-07"))

    assert path == tmp_path / "out" / "2024-01-07.md"
    content = path.read_text(encoding="utf-8")
    assert "date: 2024-01-07" in content
    assert "Read [A](https://a.example)" in content


def test_export_dir_may_be_a_string(tmp_path):
    exporter = RoundupExporter(str(tmp_path / "as-str"))
    path = exporter.export("2024-01-07", [Entry(url="https://a.example")])
    assert path == tmp_path / "as-str" / "2024-01-07.md"
    assert path.read_text(encoding="utf-8").endswith("https://a.example\n\n")
