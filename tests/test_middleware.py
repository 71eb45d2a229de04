"""Middleware tests."""

import logging

import pytest
from routerlite_core.middleware.base import (
    STOP,
    Middleware,
    MiddlewareChain,
    run_middleware,
)
from routerlite_core.middleware.logging import LoggingConfig, LoggingMiddleware
from routerlite_core.routing.router import Router


class RequireNumeric(Middleware):
    """Stops the chain unless every argument is numeric."""

    def __call__(self, *args):
        if not all(arg.isdigit() for arg in args):
            return STOP
        return None


class TestRunMiddleware:
    """Test running middleware lists."""

    def test_runs_all(self):
        """Test every middleware runs when none stops."""
        seen = []
        assert run_middleware([seen.append, seen.append], ["a"]) is True
        assert seen == ["a", "a"]

    def test_stops_on_false(self):
        """Test False stops the remaining middleware."""
        seen = []
        assert run_middleware([lambda x: False, seen.append], ["a"]) is False
        assert seen == []

    def test_empty(self):
        """Test an empty list completes."""
        assert run_middleware([], []) is True


class TestMiddlewareChain:
    """Test MiddlewareChain."""

    def test_add_and_run(self):
        """Test adding middleware."""
        seen = []
        chain = MiddlewareChain().add(seen.append).add(RequireNumeric())

        assert len(chain) == 2
        assert chain.run(["7"]) is True
        assert seen == ["7"]

    def test_remove(self):
        """Test removing middleware."""
        mw = RequireNumeric()
        chain = MiddlewareChain([mw])

        assert chain.remove(mw) is True
        assert chain.remove(mw) is False
        assert len(chain) == 0

    def test_rejects_unsupported(self):
        """Test non-callables are rejected."""
        with pytest.raises(TypeError):
            MiddlewareChain([object()])

    def test_subclass_stops(self):
        """Test a Middleware subclass stopping the chain."""
        chain = MiddlewareChain([RequireNumeric()])

        assert chain.run(["12"]) is True
        assert chain.run(["abc"]) is False

    def test_abstract_base(self):
        """Test Middleware cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Middleware()


class TestMiddlewareInRouter:
    """Test middleware classes used as route middleware."""

    def test_guard_middleware(self):
        """Test a guard short-circuits the controller."""
        router = Router()
        calls = []
        router.get("/users/{id}", calls.append, before=[RequireNumeric()])

        blocked = router.resolve("GET", "/users/abc")
        allowed = router.resolve("GET", "/users/12")

        assert blocked.aborted is True
        assert allowed.aborted is False
        assert calls == ["12"]


class TestLoggingMiddleware:
    """Test LoggingMiddleware."""

    def test_logs_args(self, caplog):
        """Test captured values are logged."""
        caplog.set_level(logging.INFO, logger="routerlite_core.middleware.logging")
        mw = LoggingMiddleware(LoggingConfig(label="users"))

        assert mw("42") is None
        assert mw.calls == 1
        assert "[users] #1 args=['42']" in caplog.text

    def test_truncates_long_args(self, caplog):
        """Test long values are shortened."""
        caplog.set_level(logging.INFO, logger="routerlite_core.middleware.logging")
        mw = LoggingMiddleware(LoggingConfig(max_arg_length=3))

        mw("abcdef")

        assert "args=['abc...']" in caplog.text

    def test_never_stops_chain(self, caplog):
        """Test logging middleware in a route chain."""
        caplog.set_level(logging.DEBUG, logger="routerlite_core")
        router = Router()
        calls = []
        mw = LoggingMiddleware()
        router.get("/items/{id}", calls.append, before=[mw], after=[mw])

        router.resolve("GET", "/items/5")

        assert calls == ["5"]
        assert mw.calls == 2
