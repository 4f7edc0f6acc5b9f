import json

import pytest

import src.__main__ as cli

BATCH = {
    "clusters": [
        {"id": "c-1", "size": 30, "label": "Trip planning", "emotional_intensity": 4, "keywords": ["旅行"]},
        {"id": "c-2", "size": 170},
    ]
}


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def test_load_batch_accepts_yaml_list(tmp_path):
    batch_file = tmp_path / "batch.yaml"
    batch_file.write_text(
        "- id: c-1\n  size: 30\n  emotional_intensity: 4\n  keywords: [旅行]\n",
        encoding="utf-8",
    )

    batch = cli.load_batch(batch_file)

    assert [c.id for c in batch.clusters] == ["c-1"]
    assert batch.total_data_size is None


def test_rank_prints_table(tmp_path, capsys):
    batch_file = tmp_path / "batch.json"
    batch_file.write_text(json.dumps(BATCH), encoding="utf-8")

    cli.main(["rank", str(batch_file)])

    out = capsys.readouterr().out
    assert "Data quality: reliable" in out
    assert "c-1 Trip planning" in out
    assert "3.9" in out


def test_rank_prints_json(tmp_path, capsys):
    batch_file = tmp_path / "batch.json"
    batch_file.write_text(json.dumps(BATCH), encoding="utf-8")

    cli.main(["rank", str(batch_file), "--json"])

    result = json.loads(capsys.readouterr().out)
    assert result["groups"]["High"][0]["priority_score"]["overall"] == 3.9
    assert result["data_quality"]["cluster_count"] == 2


def test_rank_exits_on_invalid_batch(tmp_path):
    batch_file = tmp_path / "batch.json"
    batch_file.write_text(
        json.dumps({"total_data_size": 1, "clusters": [{"id": "x", "size": 5, "emotional_intensity": 1}]}),
        encoding="utf-8",
    )

    with pytest.raises(SystemExit) as exc:
        cli.main(["rank", str(batch_file)])

    assert exc.value.code == 1


def test_rank_exits_on_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        cli.main(["rank", str(tmp_path / "nope.json")])

    assert exc.value.code == 1


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc:
        cli.main([])

    assert exc.value.code == 1
