from src.scoring import DataQualityLevel, MarketSizeScorer, assess_data_quality, classify_data_quality


def test_classification_thresholds():
    assert classify_data_quality(1000) == DataQualityLevel.RELIABLE
    assert classify_data_quality(200) == DataQualityLevel.RELIABLE
    assert classify_data_quality(199) == DataQualityLevel.PRELIMINARY
    assert classify_data_quality(50) == DataQualityLevel.PRELIMINARY
    assert classify_data_quality(49) == DataQualityLevel.EXPLORATORY
    assert classify_data_quality(0) == DataQualityLevel.EXPLORATORY


def test_exploratory_batches_are_exactly_those_with_conservative_market_estimate():
    market = MarketSizeScorer()

    for total in range(0, 260):
        exploratory = classify_data_quality(total) == DataQualityLevel.EXPLORATORY
        assert exploratory == (market.calculate(["拖拉机"], 0, total) == 2.5)


def test_assess_batch_statistics():
    report = assess_data_quality([30, 20, 10])

    assert report.level == DataQualityLevel.PRELIMINARY
    assert report.total_data_size == 60
    assert report.cluster_count == 3
    assert report.average_cluster_size == 20.0


def test_assess_with_explicit_total():
    report = assess_data_quality([1, 1, 2], total_data_size=250)

    assert report.level == DataQualityLevel.RELIABLE
    assert report.total_data_size == 250
    assert report.average_cluster_size == 1.3


def test_assess_empty_batch():
    report = assess_data_quality([])

    assert report.level == DataQualityLevel.EXPLORATORY
    assert report.cluster_count == 0
    assert report.average_cluster_size == 0.0


def test_configured_thresholds():
    sample_config = {"preliminary": 10, "reliable": 20}

    assert classify_data_quality(9, sample_config) == DataQualityLevel.EXPLORATORY
    assert classify_data_quality(10, sample_config) == DataQualityLevel.PRELIMINARY
    assert classify_data_quality(20, sample_config) == DataQualityLevel.RELIABLE
