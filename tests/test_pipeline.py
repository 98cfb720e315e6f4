from prodash import pipeline


def test_forward_path() -> None:
    assert pipeline.next_status("applied") == "interview"
    assert pipeline.next_status("interview") == "offer"


def test_terminal_statuses_have_no_next_stage() -> None:
    assert pipeline.next_status("offer") is None
    assert pipeline.next_status("rejected") is None
    assert pipeline.next_status("ghosted") is None


def test_active_statuses() -> None:
    assert pipeline.is_active("applied")
    assert pipeline.is_active("interview")
    assert not pipeline.is_active("offer")
    assert not pipeline.is_active("rejected")
