import unittest
from unittest import TestCase

from numxx.domain.utils import create_path_builder


class _Toggle:
    def __init__(self, mode):
        self.mode = mode

    def describe(self, suffix: str) -> str:
        """Describe the receiver."""
        ...


class TestControlPath(TestCase):
    def setUp(self):
        self.builder = create_path_builder("mode")

        class Target:
            def __init__(self, mode):
                self.mode = mode

            def describe(self, suffix: str) -> str:
                """Describe the receiver."""
                ...

        self.Target = Target

    def test_dispatches_on_state_attribute(self):
        Target = self.Target

        @self.builder(Target, Target.describe, "a")
        def describe_a(self, suffix):
            return "a" + suffix

        @self.builder(Target, Target.describe, "b")
        def describe_b(self, suffix):
            return "b" + suffix

        self.assertEqual(Target("a").describe("!"), "a!")
        self.assertEqual(Target("b").describe(suffix="?"), "b?")

    def test_wrapper_keeps_base_metadata(self):
        Target = self.Target
        self.builder(Target, Target.describe, "a")(lambda self, s: s)
        self.assertEqual(Target.describe.__name__, "describe")
        self.assertEqual(Target.describe.__doc__, "Describe the receiver.")

    def test_missing_path_raises_not_implemented(self):
        Target = self.Target
        self.builder(Target, Target.describe, "a")(lambda self, s: s)
        with self.assertRaises(NotImplementedError):
            Target("z").describe("")

    def test_missing_state_attribute_raises(self):
        Target = self.Target
        self.builder(Target, Target.describe, "a")(lambda self, s: s)
        obj = Target("a")
        del obj.mode
        with self.assertRaises(NotImplementedError):
            obj.describe("")

    def test_trap_exception_class(self):
        Target = self.Target
        self.builder(Target, Target.describe, "a", trap_exception=LookupError)(
            lambda self, s: s
        )
        with self.assertRaises(LookupError):
            Target("z").describe("")

    def test_trap_exception_callable_is_notified(self):
        Target = self.Target
        seen = []
        self.builder(
            Target,
            Target.describe,
            "a",
            trap_exception=lambda method, state: seen.append(state),
        )(lambda self, s: s)
        with self.assertRaises(NotImplementedError):
            Target("z").describe("")
        self.assertEqual(seen, ["z"])

    def test_unhashable_state_rejected(self):
        with self.assertRaises(TypeError):
            self.builder(self.Target, self.Target.describe, ["a"])

    def test_builders_do_not_share_registrations(self):
        other = create_path_builder("mode")
        Target = self.Target
        self.builder(Target, Target.describe, "a")(lambda self, s: "first")
        other(_Toggle, _Toggle.describe, "a")(lambda self, s: "second")
        self.assertEqual(Target("a").describe(""), "first")
        self.assertEqual(_Toggle("a").describe(""), "second")


if __name__ == "__main__":
    unittest.main()
