"""Tests for scutil workers, run synchronously."""

from vpnman.backend.models import Command
from vpnman.controller import VPNController
from vpnman.worker import ListWorker, ToggleWorker


class TestListWorker:
    """Tests for ListWorker."""

    def test_emits_configurations(self, backend):
        results, errors = [], []
        worker = ListWorker(backend)
        worker.finished.connect(results.append)
        worker.error.connect(errors.append)

        worker.run()

        assert errors == []
        assert [c.name for c in results[0]] == ["MyVPN", "Office"]

    def test_emits_error(self, backend):
        backend.fail = True
        results, errors = [], []
        worker = ListWorker(backend)
        worker.finished.connect(results.append)
        worker.error.connect(errors.append)

        worker.run()

        assert results == []
        assert errors == ["scutil --nc list failed"]


class TestToggleWorker:
    """Tests for ToggleWorker."""

    def test_start(self, backend, configs):
        results = []
        worker = ToggleWorker(backend, configs[1])
        worker.finished.connect(results.append)

        worker.run()

        assert backend.commands == [Command.start("Office")]
        assert results[0].id == "EFGH-5678"
        assert results[0].is_connected is True
        # The displayed record is only updated through the controller
        assert configs[1].is_connected is False

    def test_stop(self, backend, configs):
        results = []
        worker = ToggleWorker(backend, configs[0])
        worker.finished.connect(results.append)

        worker.run()

        assert backend.commands == [Command.stop("MyVPN")]
        assert results[0].is_connected is False

    def test_failure(self, backend, configs):
        backend.fail = True
        results, errors = [], []
        worker = ToggleWorker(backend, configs[1])
        worker.finished.connect(results.append)
        worker.error.connect(errors.append)

        worker.run()

        assert results == []
        assert errors == ["scutil --nc start Office failed"]


class TestRacingToggles:
    """Two clicks on the same entry before either command finishes."""

    def test_two_starts_end_connected(self, backend):
        controller = VPNController(backend)
        controller.refresh()
        office = controller.get("EFGH-5678")

        first = ToggleWorker(backend, office)
        second = ToggleWorker(backend, office)
        for worker in (first, second):
            worker.finished.connect(lambda result: controller.apply_toggle(result.id, result.is_connected))

        first.run()
        second.run()

        assert backend.commands[-2:] == [Command.start("Office"), Command.start("Office")]
        assert controller.get("EFGH-5678").is_connected is True

    def test_two_stops_end_disconnected(self, backend):
        controller = VPNController(backend)
        controller.refresh()
        apply = lambda result: controller.apply_toggle(result.id, result.is_connected)

        start = ToggleWorker(backend, controller.get("EFGH-5678"))
        start.finished.connect(apply)
        start.run()

        stop = ToggleWorker(backend, controller.get("EFGH-5678"))
        second_stop = ToggleWorker(backend, controller.get("EFGH-5678"))
        stop.finished.connect(apply)
        second_stop.finished.connect(apply)

        stop.run()
        assert controller.get("EFGH-5678").is_connected is False
        # Issued while still connected, so it is a stop as well
        second_stop.run()

        assert backend.commands[-3:] == [
            Command.start("Office"),
            Command.stop("Office"),
            Command.stop("Office"),
        ]
        assert controller.get("EFGH-5678").is_connected is False
