from src.scoring import CompetitionScorer, ExistingSolution


def _solutions(count, prefix="App"):
    return [ExistingSolution(name=f"{prefix} {i}", limitation="too expensive") for i in range(count)]


def test_step_function_by_valid_competitor_count():
    scorer = CompetitionScorer()

    expected = {0: 5.0, 1: 4.0, 2: 3.0, 3: 2.0, 4: 1.0, 5: 1.0, 12: 1.0}
    for count, score in expected.items():
        assert scorer.calculate(_solutions(count)) == score


def test_sentinel_entries_only_count_as_no_competition():
    scorer = CompetitionScorer()
    sentinels = [
        ExistingSolution(name="待调研", limitation=""),
        ExistingSolution(name="解析失败: timeout", limitation=""),
        ExistingSolution(name="API调用失败", limitation=""),
        ExistingSolution(name="Parse failed", limitation=""),
    ]

    assert scorer.calculate(sentinels) == 5.0
    assert scorer.count_valid(sentinels) == 0


def test_sentinel_entries_are_discarded_before_counting():
    scorer = CompetitionScorer()
    solutions = _solutions(2) + [ExistingSolution(name="待调研", limitation="")] * 3

    assert scorer.calculate(solutions) == 3.0


def test_plain_mappings_are_accepted():
    scorer = CompetitionScorer()
    solutions = [
        {"name": "Notion", "limitation": "steep learning curve"},
        {"name": "API调用失败", "limitation": ""},
    ]

    assert scorer.calculate(solutions) == 4.0


def test_configured_sentinels_replace_defaults():
    scorer = CompetitionScorer({"competition": {"sentinel_substrings": ["N/A"]}})
    solutions = [
        ExistingSolution(name="N/A", limitation=""),
        ExistingSolution(name="待调研", limitation=""),
    ]

    assert scorer.count_valid(solutions) == 1
    assert scorer.calculate(solutions) == 4.0


def test_empty_sentinel_list_disables_filtering():
    scorer = CompetitionScorer({"competition": {"sentinel_substrings": []}})
    solutions = [ExistingSolution(name="待调研", limitation="")]

    assert scorer.sentinel_substrings == ()
    assert scorer.calculate(solutions) == 4.0
