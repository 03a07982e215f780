from operette.utils.logging import get, setup


def test_logger_levels():
    logger = get("debug")
    assert logger.level == 10  # DEBUG
    logger = get("error")
    assert logger.level == 40  # ERROR
    logger = get("nonsense")
    assert logger.level == 20  # falls back to INFO


def test_setup_returns_package_logger():
    logger = setup("warning")
    assert logger.name == "operette"
    assert logger.level == 30


def test_duplicate_settlement_logged_at_debug(caplog):
    from operette import Operation

    get("debug")
    op = Operation()
    with caplog.at_level("DEBUG", logger="operette"):
        op.succeed(1)
        op.succeed(2)
    assert any("already succeeded" in r.getMessage() for r in caplog.records)
    get("info")
