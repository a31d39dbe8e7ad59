"""Tests for background worker threads (run synchronously)."""

import pytest

pytest.importorskip("PyQt6.QtCore")

from PyQt6.QtCore import QCoreApplication  # noqa: E402

from borno.exceptions import CapabilityUnavailableError, EnrichmentError  # noqa: E402
from borno.gui.workers import EnrichmentWorkerThread, SpeechInputWorkerThread  # noqa: E402
from borno.models import EnrichmentTicket  # noqa: E402

_app = QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def ticket():
    return EnrichmentTicket(session_id="s", generation=1, word="Apple", language_hint="en")


class TestEnrichmentWorkerThread:
    def test_emits_result(self, fake_enrichment, make_result, ticket):
        fake_enrichment.result = make_result()
        worker = EnrichmentWorkerThread(fake_enrichment, ticket)
        received = []
        worker.result_ready.connect(lambda t, r: received.append((t, r)))

        worker.run()

        assert received == [(ticket, fake_enrichment.result)]
        assert fake_enrichment.calls == [("Apple", "en")]

    def test_emits_failure(self, fake_enrichment, ticket):
        fake_enrichment.error = EnrichmentError("timed out")
        worker = EnrichmentWorkerThread(fake_enrichment, ticket)
        failures = []
        worker.failed.connect(lambda t, msg: failures.append(msg))

        worker.run()

        assert failures == ["timed out"]

    def test_cancelled_before_start(self, fake_enrichment, ticket):
        worker = EnrichmentWorkerThread(fake_enrichment, ticket)
        worker.cancel()
        worker.run()
        assert fake_enrichment.calls == []

    def test_cancelled_during_call_emits_nothing(self, fake_enrichment, make_result, ticket):
        worker = EnrichmentWorkerThread(fake_enrichment, ticket)
        received = []
        worker.result_ready.connect(lambda t, r: received.append(r))

        def generate_and_cancel(word, hint=None):
            worker.cancel()
            return make_result()

        fake_enrichment.generate = generate_and_cancel
        worker.run()

        assert received == []

    def test_result_feeds_controller(self, controller, fake_enrichment, make_result):
        controller.new_entry("Book")
        ticket = controller.start_enrichment()
        fake_enrichment.result = make_result("Book")
        worker = EnrichmentWorkerThread(fake_enrichment, ticket)
        worker.result_ready.connect(controller.finish_enrichment)

        worker.run()

        assert controller.edit_session.draft.meaning == "A round fruit"


class FakeListener:
    def __init__(self, transcript=None):
        self.transcript = transcript

    def is_available(self):
        return self.transcript is not None

    def listen(self, language="bn-BD"):
        if self.transcript is None:
            raise CapabilityUnavailableError("unsupported")
        return self.transcript


class TestSpeechInputWorkerThread:
    def test_emits_transcript(self):
        worker = SpeechInputWorkerThread(FakeListener("আপেল"))
        received = []
        worker.transcript_ready.connect(received.append)
        worker.run()
        assert received == ["আপেল"]

    def test_emits_unavailable(self):
        worker = SpeechInputWorkerThread(FakeListener(None))
        messages = []
        worker.unavailable.connect(messages.append)
        worker.run()
        assert messages == ["unsupported"]

    def test_unexpected_failure_emits_error(self):
        listener = FakeListener("x")

        def broken_listen(language="bn-BD"):
            raise RuntimeError("mic busy")

        listener.listen = broken_listen
        worker = SpeechInputWorkerThread(listener)
        errors = []
        worker.error.connect(errors.append)
        worker.run()
        assert errors == ["Voice search failed: mic busy"]

    def test_cancelled_worker_is_silent(self):
        worker = SpeechInputWorkerThread(FakeListener("আপেল"))
        received = []
        worker.transcript_ready.connect(received.append)
        worker.cancel()
        assert worker.emit_unless_cancelled(worker.transcript_ready, "late") is False
        worker.run()
        assert received == []
