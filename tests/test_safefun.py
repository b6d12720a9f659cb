import pytest

from xtoolkit.safefun import PanicError, RollbackError, RollbackOp, dump_stack, fun_wrapper


def test_rollback_runs_in_reverse():
    calls = []
    op = RollbackOp()
    for name in ("one", "two", "three"):
        op.add(lambda name=name: calls.append(name))
    op.rollback()
    assert calls == ["three", "two", "one"]


def test_rollback_collects_errors_and_runs_all():
    calls = []

    def fail(message):
        def step():
            calls.append(message)
            raise ValueError(message)

        return step

    op = RollbackOp()
    op.add(fail("first"))
    op.add(lambda: calls.append("second"))
    op.add(fail("third"))
    with pytest.raises(RollbackError) as info:
        op.rollback()
    assert calls == ["third", "second", "first"]
    assert [str(e) for e in info.value.errors] == ["third", "first"]
    assert str(info.value) == "third: first"


def test_empty_rollback_is_quiet():
    assert RollbackOp().rollback() is None


def test_fun_wrapper_no_error():
    seen = []
    assert fun_wrapper(seen.append, 5) is None
    assert seen == [5]


def test_fun_wrapper_passes_args():
    seen = []
    assert fun_wrapper(lambda *a: seen.extend(a), 1, 2, 3) is None
    assert seen == [1, 2, 3]


def test_fun_wrapper_captures_exception():
    def boom():
        raise KeyError("missing")

    error = fun_wrapper(boom)
    assert isinstance(error, PanicError)
    assert isinstance(error.__cause__, KeyError)
    assert str(error).startswith("'missing'")
    assert "test_safefun.py" in str(error)


def test_dump_stack_none():
    assert dump_stack(None) is None


def test_dump_stack_plain_value():
    error = dump_stack("oops")
    assert str(error).startswith("oops\t ")
    assert error.__cause__ is None
    assert "test_safefun.py" in str(error)