"""
View tests: observer registry, broadcast and mediators
"""

import pytest

from mvccore import DispatchMetrics, Mediator, MultitonError, Notification, Observer, View


class Context:
    """Plain notify context"""
    pass


class InterestMediator(Mediator):

    def __init__(self, name, interests):
        super().__init__(name)
        self.interests = list(interests)
        self.received = []
        self.registered = 0
        self.removed = 0

    def list_notification_interests(self):
        return self.interests

    def handle_notification(self, name, body=None, type=None):
        self.received.append((name, body, type))

    def on_register(self):
        self.registered += 1

    def on_remove(self):
        self.removed += 1


class TestObserverRegistry:

    def test_broadcast_runs_observers_in_registration_order(self, view, recorder):
        for label in ("o1", "o2", "o3", "o4"):
            view.register_observer("tick", Observer(recorder.callback(label), Context()))

        view.notify_observers(Notification("tick", 5, "t"))

        assert recorder.labels == ["o1", "o2", "o3", "o4"]
        assert all(call[1:] == ("tick", 5, "t") for call in recorder.calls)

    def test_observer_removed_during_broadcast_still_runs_once(self, view, recorder):
        victim_context = Context()

        def remover(name, body=None, type=None):
            recorder.calls.append(("remover", name, body, type))
            view.remove_observer("tick", victim_context)

        view.register_observer("tick", Observer(remover, Context()))
        view.register_observer("tick", Observer(recorder.callback("victim"), victim_context))

        view.notify_observers(Notification("tick"))
        assert recorder.labels == ["remover", "victim"]

        recorder.calls.clear()
        view.notify_observers(Notification("tick"))
        assert recorder.labels == ["remover"]

    def test_observer_added_during_broadcast_waits_for_next_one(self, view, recorder):
        def adder(name, body=None, type=None):
            recorder.calls.append(("adder", name, body, type))
            view.register_observer("tick", Observer(recorder.callback("late"), Context()))

        view.register_observer("tick", Observer(adder, Context()))
        view.notify_observers(Notification("tick"))

        assert recorder.labels == ["adder"]

    def test_removing_last_observer_deletes_name(self, view, recorder):
        context = Context()
        view.register_observer("tick", Observer(recorder.callback("only"), context))

        view.remove_observer("tick", context)

        assert not view.has_observers("tick")
        assert view.observer_count("tick") == 0
        view.notify_observers(Notification("tick"))
        assert recorder.calls == []

    def test_remove_observer_takes_last_match_only(self, view, recorder):
        context = Context()
        view.register_observer("tick", Observer(recorder.callback("first"), context))
        view.register_observer("tick", Observer(recorder.callback("second"), context))

        view.remove_observer("tick", context)
        view.notify_observers(Notification("tick"))

        assert recorder.labels == ["first"]

    def test_returned_observer_works_as_removal_handle(self, view, recorder):
        handle = view.register_observer("tick", Observer(recorder.callback("a"), Context()))
        view.register_observer("tick", Observer(recorder.callback("b"), Context()))

        view.remove_observer("tick", handle)
        view.notify_observers(Notification("tick"))

        assert recorder.labels == ["b"]

    def test_remove_observer_for_unknown_name_is_noop(self, view):
        view.remove_observer("missing", Context())
        assert not view.has_observers("missing")

    def test_broadcast_without_observers_still_disposes(self, view):
        notification = view.pool.allocate("nobody")

        view.notify_observers(notification)

        assert notification.released
        assert notification in view.pool

    def test_broadcast_disposes_after_all_observers(self, view):
        seen = []
        notification = view.pool.allocate("tick", "payload")

        view.register_observer("tick", Observer(lambda n, b=None, t=None: seen.append(notification.released), Context()))
        view.register_observer("tick", Observer(lambda n, b=None, t=None: seen.append(notification.released), Context()))
        view.notify_observers(notification)

        assert seen == [False, False]
        assert notification.released

    def test_nested_broadcast_completes_before_outer_continues(self, view, recorder):
        def relay(name, body=None, type=None):
            recorder.calls.append(("relay", name, body, type))
            view.notify_observers(view.pool.allocate("inner", body))

        view.register_observer("outer", Observer(relay, Context()))
        view.register_observer("outer", Observer(recorder.callback("outer-2"), Context()))
        view.register_observer("inner", Observer(recorder.callback("inner-1"), Context()))

        view.notify_observers(view.pool.allocate("outer", 1))

        assert recorder.labels == ["relay", "inner-1", "outer-2"]


class TestObserverErrors:

    def test_error_aborts_fan_out_and_disposes(self, view, recorder):
        def boom(name, body=None, type=None):
            raise RuntimeError("boom")

        view.register_observer("tick", Observer(boom, Context()))
        view.register_observer("tick", Observer(recorder.callback("after"), Context()))
        notification = view.pool.allocate("tick")

        with pytest.raises(RuntimeError):
            view.notify_observers(notification)

        assert recorder.calls == []
        assert notification.released

    def test_isolation_mode_logs_and_continues(self, core_key, recorder, caplog):
        metrics = DispatchMetrics()
        isolated = View(core_key, isolate_observer_errors=True, metrics=metrics)

        def boom(name, body=None, type=None):
            raise RuntimeError("boom")

        isolated.register_observer("tick", Observer(boom, Context()))
        isolated.register_observer("tick", Observer(recorder.callback("after"), Context()))

        with caplog.at_level("ERROR", logger="mvccore"):
            isolated.notify_observers(Notification("tick"))

        assert recorder.labels == ["after"]
        assert metrics.observer_errors == 1
        assert metrics.observers_notified == 1
        assert "failed handling 'tick'" in caplog.text


class TestMediators:

    def test_register_shares_one_observer_across_interests(self, view):
        mediator = InterestMediator("m", ["A", "B"])

        view.register_mediator(mediator)

        assert view.has_mediator("m")
        assert view.retrieve_mediator("m") is mediator
        assert mediator.registered == 1
        assert view._observer_map["A"][0] is view._observer_map["B"][0]

    def test_mediator_receives_and_stops_after_removal(self, view):
        mediator = InterestMediator("m", ["A", "B"])
        view.register_mediator(mediator)

        view.notify_observers(Notification("A", 42))
        assert mediator.received == [("A", 42, None)]

        assert view.remove_mediator("m") is mediator
        view.notify_observers(Notification("A", 7))

        assert mediator.received == [("A", 42, None)]
        assert mediator.removed == 1
        assert not view.has_mediator("m")
        assert not view.has_observers("A")
        assert not view.has_observers("B")

    def test_duplicate_name_is_ignored(self, view):
        first = InterestMediator("m", ["A"])
        second = InterestMediator("m", ["A"])

        view.register_mediator(first)
        view.register_mediator(second)

        assert view.retrieve_mediator("m") is first
        assert second.registered == 0
        assert view.observer_count("A") == 1

    def test_mediator_without_interests_registers_no_observer(self, view):
        mediator = InterestMediator("quiet", [])

        view.register_mediator(mediator)

        assert view.has_mediator("quiet")
        assert view._observer_map == {}
        assert mediator.registered == 1

    def test_removal_keeps_other_observers_of_shared_name(self, view, recorder):
        view.register_observer("A", Observer(recorder.callback("other"), Context()))
        view.register_mediator(InterestMediator("m", ["A"]))

        view.remove_mediator("m")

        assert view.observer_count("A") == 1

    def test_missing_mediator_lookups_return_none(self, view):
        assert view.retrieve_mediator("ghost") is None
        assert view.remove_mediator("ghost") is None
        assert view.has_mediator("ghost") is False


class TestViewLifecycle:

    def test_second_construction_for_key_fails(self, view, core_key):
        with pytest.raises(MultitonError):
            View(core_key)

    def test_get_instance_returns_existing(self, view, core_key):
        assert View.get_instance(core_key) is view

    def test_remove_view_allows_new_instance(self, view, core_key):
        View.remove_view(core_key)

        assert not View.has_view(core_key)
        assert View(core_key) is not view
