import pytest

from gltoolkit.scope_exiter import ScopeExiter


def test_function_runs_on_exit():
    calls = []
    with ScopeExiter(lambda: calls.append("done")):
        assert calls == []
    assert calls == ["done"]


def test_close_runs_only_once():
    calls = []
    exiter = ScopeExiter(lambda: calls.append(1))
    exiter.close()
    exiter.close()
    assert calls == [1]


def test_set_exit_function_replaces():
    calls = []
    exiter = ScopeExiter(lambda: calls.append("old"))
    exiter.set_exit_function(lambda: calls.append("new"))
    with exiter:
        pass
    assert calls == ["new"]


def test_runs_when_exception_propagates():
    calls = []
    with pytest.raises(RuntimeError):
        with ScopeExiter(lambda: calls.append("cleanup")):
            raise RuntimeError("boom")
    assert calls == ["cleanup"]


def test_warns_without_function(capsys):
    with ScopeExiter():
        pass
    assert "without a valid exit function" in capsys.readouterr().err


def test_enter_returns_self():
    exiter = ScopeExiter(lambda: None)
    with exiter as entered:
        assert entered is exiter