"""Unit tests for ui.announcer — alerts and live-region messages."""

from ui.announcer import AlertKind, Announcer, Politeness


class TestAnnouncer:
    def test_success(self) -> None:
        announcer = Announcer()
        announcer.success("Saved")
        assert announcer.alert.kind is AlertKind.SUCCESS
        assert announcer.alert.message == "Saved"
        assert announcer.live.message == "Success: Saved"
        assert announcer.live.politeness is Politeness.POLITE

    def test_error_is_assertive(self) -> None:
        announcer = Announcer()
        announcer.error("Boom")
        assert announcer.alert.kind is AlertKind.ERROR
        assert announcer.live.message == "Error: Boom"
        assert announcer.live.politeness is Politeness.ASSERTIVE

    def test_info(self) -> None:
        announcer = Announcer()
        announcer.info("FYI")
        assert announcer.live.message == "Info: FYI"

    def test_announce_leaves_alert(self) -> None:
        announcer = Announcer()
        announcer.success("Saved")
        announcer.announce("Notes list loaded")
        assert announcer.alert.message == "Saved"
        assert announcer.live.message == "Notes list loaded"

    def test_new_alert_replaces_old(self) -> None:
        announcer = Announcer()
        announcer.success("first")
        announcer.error("second")
        assert announcer.alert.message == "second"

    def test_clear_only_dismisses_alert(self) -> None:
        announcer = Announcer()
        announcer.info("hello")
        announcer.clear()
        assert announcer.alert is None
        assert announcer.live is not None

    def test_history_is_bounded(self) -> None:
        announcer = Announcer()
        for i in range(60):
            announcer.announce(f"msg {i}")
        assert len(announcer.history) == 50
        assert announcer.history[-1].message == "msg 59"
