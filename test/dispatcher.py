"""
Dispatcher behavioral tests (routing, gating order, callbacks).

Scope
- Validate that exactly one of no-match / wrong-role / no-permission / handler happens.
- Validate that the role check strictly precedes the permission check.
- Validate callback installation rules and handler exception propagation.

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase
from unittest.mock import MagicMock

from commandeer import Authority, Dispatcher, Registry, SubCommand


class Recorder(SubCommand):
    def __init__(self, result=True, **options):
        super().__init__(**options)
        self.result = result
        self.calls = []

    def execute(self, caller, context, args):
        self.calls.append((caller, context, args))
        return self.result


class Table(Authority):
    """Authority answering from fixed role/permission sets and logging every question."""

    def __init__(self, roles=(), permissions=()):
        self.roles = set(roles)
        self.permissions = set(permissions)
        self.asked = []

    def check_role(self, caller, role):
        self.asked.append(("role", role))
        return role is None or role in self.roles

    def check_permission(self, caller, permission):
        self.asked.append(("permission", permission))
        return permission is None or permission in self.permissions


class TestDispatch(TestCase):
    """Behavioral tests for Dispatcher.dispatch()."""

    def setUp(self):
        self.registry = Registry()
        self.short = Recorder()
        self.long = Recorder()
        self.registry.register(["a"], self.short)
        self.registry.register(["a", "b"], self.long)
        self.nomatch = MagicMock(return_value=False)
        self.wrongrole = MagicMock()
        self.nopermission = MagicMock()
        self.dispatcher = Dispatcher(
            self.registry,
            nomatch=self.nomatch,
            wrongrole=self.wrongrole,
            nopermission=self.nopermission,
        )

    def testLongestPrefixHandlerIsInvoked(self):
        self.assertTrue(self.dispatcher.dispatch(["a", "b", "c"], "caller", "context"))
        self.assertEqual(self.long.calls, [("caller", "context", ("c",))])
        self.assertEqual(self.short.calls, [])

    def testDivergingInputFallsBackToShorterPath(self):
        self.dispatcher.dispatch(["a", "c"], "caller")
        self.assertEqual(self.short.calls, [("caller", None, ("c",))])
        self.assertEqual(self.long.calls, [])

    def testCaseInsensitiveDispatch(self):
        registry = Registry()
        command = Recorder()
        registry.register(["Foo", "Bar"], command)
        Dispatcher(registry).dispatch(["foo", "bar", "x"], "caller")
        self.assertEqual(command.calls, [("caller", None, ("x",))])

    def testHandlerResultIsReturned(self):
        registry = Registry()
        registry.register("nope", Recorder(result=False))
        self.assertFalse(Dispatcher(registry).dispatch(["nope"], "caller"))

    def testNoMatchInvokesCallbackOnly(self):
        result = self.dispatcher.dispatch(["qqq"], "caller", "context")
        self.assertFalse(result)
        self.nomatch.assert_called_once_with(("qqq",), "caller", "context")
        self.assertEqual(self.short.calls + self.long.calls, [])
        self.wrongrole.assert_not_called()
        self.nopermission.assert_not_called()

    def testNoMatchResultIsReturned(self):
        self.nomatch.return_value = True
        self.assertTrue(self.dispatcher.dispatch(["qqq"], "caller"))

    def testDefaultNoMatchReturnsFalse(self):
        self.assertFalse(Dispatcher(self.registry).dispatch(["qqq"], "caller"))

    def testHandlerExceptionsPropagate(self):
        registry = Registry()

        class Broken(SubCommand):
            def execute(self, caller, context, args):
                raise RuntimeError("boom")

        registry.register("broken", Broken())
        with self.assertRaises(RuntimeError):
            Dispatcher(registry).dispatch(["broken"], "caller")


class TestGate(TestCase):
    """Behavioral tests for role/permission gating."""

    def setUp(self):
        self.registry = Registry()
        self.command = Recorder(role="player", permission="game.play")
        self.registry.register("play", self.command)
        self.wrongrole = MagicMock()
        self.nopermission = MagicMock()

    def _dispatcher(self, authority):
        return Dispatcher(self.registry, authority, wrongrole=self.wrongrole, nopermission=self.nopermission)

    def testWrongRoleShortCircuits(self):
        authority = Table()
        self.assertTrue(self._dispatcher(authority).dispatch(["play", "now"], "caller"))
        self.wrongrole.assert_called_once()
        resolution, caller = self.wrongrole.call_args.args
        self.assertEqual(resolution.entry.name, "play")
        self.assertEqual(resolution.args, ("now",))
        self.assertEqual(caller, "caller")
        self.nopermission.assert_not_called()
        self.assertEqual(self.command.calls, [])

    def testRoleFailureNeverChecksPermission(self):
        authority = Table()
        self._dispatcher(authority).dispatch(["play"], "caller")
        self.assertEqual(authority.asked, [("role", "player")])

    def testMissingPermission(self):
        authority = Table(roles={"player"})
        self.assertTrue(self._dispatcher(authority).dispatch(["play"], "caller"))
        self.wrongrole.assert_not_called()
        self.nopermission.assert_called_once()
        self.assertEqual(self.command.calls, [])

    def testRoleIsCheckedBeforePermission(self):
        authority = Table(roles={"player"}, permissions={"game.play"})
        self._dispatcher(authority).dispatch(["play"], "caller")
        self.assertEqual(authority.asked, [("role", "player"), ("permission", "game.play")])

    def testGrantedRunsHandler(self):
        authority = Table(roles={"player"}, permissions={"game.play"})
        self.assertTrue(self._dispatcher(authority).dispatch(["play", "x"], "caller", "ctx"))
        self.assertEqual(self.command.calls, [("caller", "ctx", ("x",))])
        self.wrongrole.assert_not_called()
        self.nopermission.assert_not_called()

    def testDeniedWithoutCallbacksStillReportsHandled(self):
        self.assertTrue(Dispatcher(self.registry, Table()).dispatch(["play"], "caller"))
        self.assertEqual(self.command.calls, [])


class TestCallbacks(TestCase):
    """Behavioral tests for callback installation."""

    def setUp(self):
        self.dispatcher = Dispatcher(Registry())

    def testDecoratorInstallsCallback(self):
        @self.dispatcher.nomatch
        def nomatch(tokens, caller, context):
            return True

        self.assertTrue(self.dispatcher.dispatch(["x"], "caller"))

    def testCallbackCannotBeOverridden(self):
        self.dispatcher.wrongrole(lambda resolution, caller: None)
        with self.assertRaises(TypeError):
            self.dispatcher.wrongrole(lambda resolution, caller: None)

    def testConstructorCallbackCannotBeOverridden(self):
        dispatcher = Dispatcher(Registry(), nopermission=lambda resolution, caller: None)
        with self.assertRaises(TypeError):
            dispatcher.nopermission(lambda resolution, caller: None)

    def testNonCallableRejected(self):
        with self.assertRaises(TypeError):
            self.dispatcher.nomatch("nope")

    def testDefaultAuthorityGrantsEverything(self):
        self.assertIsInstance(self.dispatcher.authority, Authority)


if __name__ == "__main__":
    unittest.main()
