import json

from fakes import ARTICLE_PAYLOAD, SEO_PAYLOAD, TITLES_PAYLOAD, FakeClient, as_reply
from generate import main, parse_args

SLUG = "remote-work-playbook-12-field-tested-practices"


def test_parse_args_defaults():
    args = parse_args(["--keyword", "remote work"])
    assert args.pick == 1
    assert args.format == "both"
    assert args.titles_only is False
    assert args.no_seo is False


def test_titles_only_prints_ideas(capsys, tmp_path):
    client = FakeClient(as_reply(TITLES_PAYLOAD))
    code = main(["--keyword", "remote work", "--titles-only", "--output-dir", str(tmp_path)], client=client)

    assert code == 0
    out = capsys.readouterr().out
    assert "OK 2 titles" in out
    assert TITLES_PAYLOAD["titles"][1]["title"] in out
    assert list(tmp_path.iterdir()) == []


def test_full_run_writes_exports(capsys, tmp_path):
    client = FakeClient(as_reply(TITLES_PAYLOAD), as_reply(ARTICLE_PAYLOAD), as_reply(SEO_PAYLOAD))
    code = main(["--keyword", "remote work", "--output-dir", str(tmp_path)], client=client)

    assert code == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == sorted(
        [f"{SLUG}.md", f"{SLUG}.html", f"{SLUG}.json", f"{SLUG}_quality.json"]
    )
    assert (tmp_path / f"{SLUG}.md").read_text(encoding="utf-8").startswith("---\n")
    saved = json.loads((tmp_path / f"{SLUG}.json").read_text(encoding="utf-8"))
    assert saved["seoMetadata"]["title"] == SEO_PAYLOAD["title"]
    quality = json.loads((tmp_path / f"{SLUG}_quality.json").read_text(encoding="utf-8"))
    assert quality["section_count"]["count"] == 2
    assert "QUALITY REPORT" in capsys.readouterr().out


def test_pick_and_no_seo(tmp_path):
    client = FakeClient(as_reply(TITLES_PAYLOAD), as_reply(ARTICLE_PAYLOAD))
    code = main(
        ["--keyword", "remote work", "--pick", "2", "--no-seo", "--format", "markdown", "--output-dir", str(tmp_path)],
        client=client,
    )

    assert code == 0
    assert len(client.calls) == 2
    assert "Remote Work vs Hybrid" in client.calls[1]["messages"][0]["content"]
    assert not (tmp_path / f"{SLUG}.html").exists()
    assert not (tmp_path / f"{SLUG}.md").read_text(encoding="utf-8").startswith("---")


def test_seo_failure_is_reported(capsys, tmp_path):
    client = FakeClient(as_reply(TITLES_PAYLOAD), as_reply(ARTICLE_PAYLOAD), "not json")
    code = main(["--keyword", "remote work", "--output-dir", str(tmp_path)], client=client)

    assert code == 0
    assert "SEO metadata could not be generated" in capsys.readouterr().out


def test_bad_pick_fails(capsys, tmp_path):
    client = FakeClient(as_reply(TITLES_PAYLOAD))
    code = main(["--keyword", "remote work", "--pick", "5", "--output-dir", str(tmp_path)], client=client)

    assert code == 1
    assert "--pick must be between 1 and 2" in capsys.readouterr().err


def test_generation_error_fails(capsys, tmp_path):
    code = main(["--keyword", "remote work", "--output-dir", str(tmp_path)], client=FakeClient(None))
    assert code == 1
    assert "ERROR" in capsys.readouterr().err
