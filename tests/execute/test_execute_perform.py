import threading
import unittest

from podsync.errors import (
    ClusterAuthError,
    DiscoveryError,
    ExecutionError,
    NoEffectError,
    SyncCancelledError,
)
from podsync.execute import perform
from podsync.models import Container, Pod
from podsync.plan import SyncPlan

IMAGE = "web:v1"
PLAN = SyncPlan(image=IMAGE, copy={"ws/a.js": ("/app/a.js",)})


class FakeLister:
    def __init__(self, pods_by_ns=None, error: Exception | None = None) -> None:
        self.calls = []
        self.pods_by_ns = pods_by_ns or {}
        self.error = error

    def list_pods(self, namespace: str):
        self.calls.append(namespace)
        if self.error is not None:
            raise self.error
        return self.pods_by_ns.get(namespace, [])


class FakeOp:
    def __init__(self, log: list, label: str, error: Exception | None = None) -> None:
        self.log = log
        self.label = label
        self.error = error

    def describe(self) -> str:
        return self.label

    def run(self) -> None:
        if self.error is not None:
            raise self.error
        self.log.append(self.label)


def _pod(name: str, ns: str, *images: str) -> Pod:
    return Pod(
        name=name,
        namespace=ns,
        containers=tuple(Container(name=f"c{i}", image=img) for i, img in enumerate(images)),
    )


class TestPerform(unittest.TestCase):
    def test_empty_plan_does_not_touch_cluster(self) -> None:
        lister = FakeLister()
        generated = []

        count = perform(
            IMAGE,
            SyncPlan(image=IMAGE),
            ["default"],
            lambda p, c, plan: generated.append(c) or [],
            pod_lister=lister,
        )

        self.assertEqual(count, 0)
        self.assertEqual(lister.calls, [])
        self.assertEqual(generated, [])

    def test_runs_only_in_matching_containers_in_listing_order(self) -> None:
        log = []
        lister = FakeLister(
            {
                "dev": [_pod("p1", "dev", IMAGE, "sidecar:1"), _pod("p2", "dev", "other:1")],
                "qa": [_pod("p3", "qa", "sidecar:1", IMAGE)],
            }
        )
        seen = []

        def generator(pod, container, plan):
            seen.append((pod.name, container.name))
            self.assertIs(plan, PLAN)
            return [FakeOp(log, f"{pod.name}/{container.name}/1"), FakeOp(log, f"{pod.name}/{container.name}/2")]

        count = perform(IMAGE, PLAN, ["dev", "qa"], generator, pod_lister=lister)

        self.assertEqual(count, 4)
        self.assertEqual(lister.calls, ["dev", "qa"])
        self.assertEqual(seen, [("p1", "c0"), ("p3", "c1")])
        self.assertEqual(log, ["p1/c0/1", "p1/c0/2", "p3/c1/1", "p3/c1/2"])

    def test_image_must_match_exactly(self) -> None:
        lister = FakeLister({"dev": [_pod("p1", "dev", "web:v1-debug", "web")]})
        with self.assertRaises(NoEffectError):
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [FakeOp([], "x")], pod_lister=lister)

    def test_no_matching_container_is_no_effect_error(self) -> None:
        lister = FakeLister({"dev": [_pod("p1", "dev", "other:1")]})

        with self.assertRaises(NoEffectError) as ctx:
            perform(IMAGE, PLAN, ["dev", "qa"], lambda p, c, plan: [], pod_lister=lister)
        self.assertIn("didn't sync any files", str(ctx.exception))
        self.assertEqual(lister.calls, ["dev", "qa"])

    def test_generator_without_operations_is_no_effect_error(self) -> None:
        lister = FakeLister({"dev": [_pod("p1", "dev", IMAGE)]})
        with self.assertRaises(NoEffectError):
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [], pod_lister=lister)

    def test_first_failure_aborts_without_rollback(self) -> None:
        log = []
        failure = ExecutionError("boom")
        lister = FakeLister({"dev": [_pod("p1", "dev", IMAGE), _pod("p2", "dev", IMAGE)]})

        def generator(pod, container, plan):
            return [
                FakeOp(log, "first"),
                FakeOp(log, "second", error=failure),
                FakeOp(log, "third"),
            ]

        with self.assertRaises(ExecutionError) as ctx:
            perform(IMAGE, PLAN, ["dev"], generator, pod_lister=lister)

        self.assertIs(ctx.exception, failure)
        self.assertEqual(log, ["first"])

    def test_operation_errors_are_not_reclassified(self) -> None:
        lister = FakeLister({"dev": [_pod("p1", "dev", IMAGE)]})
        failure = KeyError("custom")

        with self.assertRaises(KeyError) as ctx:
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [FakeOp([], "x", failure)], pod_lister=lister)
        self.assertIs(ctx.exception, failure)

    def test_listing_failure_is_discovery_error(self) -> None:
        lister = FakeLister(error=RuntimeError("connection refused"))

        with self.assertRaises(DiscoveryError) as ctx:
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [], pod_lister=lister)
        self.assertEqual(ctx.exception.details["namespace"], "dev")

    def test_discovery_errors_from_lister_propagate_unchanged(self) -> None:
        failure = ClusterAuthError("unauthorized")
        lister = FakeLister(error=failure)

        with self.assertRaises(ClusterAuthError) as ctx:
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [], pod_lister=lister)
        self.assertIs(ctx.exception, failure)

    def test_cancelled_before_start(self) -> None:
        cancel = threading.Event()
        cancel.set()
        lister = FakeLister({"dev": [_pod("p1", "dev", IMAGE)]})

        with self.assertRaises(SyncCancelledError):
            perform(IMAGE, PLAN, ["dev"], lambda p, c, plan: [], pod_lister=lister, cancel_event=cancel)
        self.assertEqual(lister.calls, [])

    def test_cancel_between_operations_keeps_applied_ones(self) -> None:
        cancel = threading.Event()
        log = []
        lister = FakeLister({"dev": [_pod("p1", "dev", IMAGE)]})

        class CancellingOp(FakeOp):
            def run(self) -> None:
                super().run()
                cancel.set()

        def generator(pod, container, plan):
            return [CancellingOp(log, "first"), FakeOp(log, "second")]

        with self.assertRaises(SyncCancelledError) as ctx:
            perform(IMAGE, PLAN, ["dev"], generator, pod_lister=lister, cancel_event=cancel)

        self.assertEqual(log, ["first"])
        self.assertEqual(ctx.exception.details["operations_run"], 1)


if __name__ == "__main__":
    unittest.main()
